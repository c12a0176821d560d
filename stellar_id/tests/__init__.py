"""
Test suite for stellar ID generation.

Focus areas:
- Hash determinism and fixed-width behavior
- Cache transparency
- Option validation boundaries
- Pipeline stages (assembly, length, case, special characters)
"""
