"""
Core statistical operators over ordered numeric series.

This module contains the pure computation layer (moving averages, central
moments, range volatility, covariance) and the data contracts. It is
independent of external systems (quote services, storage, etc.).
"""
