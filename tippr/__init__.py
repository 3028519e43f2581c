"""
Tippr - Tip Calculation & Bill-Splitting Service

A FastAPI-based service around a pure calculation engine that validates
bill and tip input, computes tips and totals, and splits totals fairly
down to the last cent.
"""

__version__ = "0.1.0"
