"""
Shared service utilities.

- http.py - requests session used by every data source
"""
