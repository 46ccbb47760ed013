"""Module input loading.

This package reads compiled WebAssembly modules from local storage.
"""
