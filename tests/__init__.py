"""
Test suite for the matrix toolbox

Contains:
- tests/unit/          : Unit tests for the kernel, codecs and command session
"""
