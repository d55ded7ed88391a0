"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the tokenmath value types.
Any compliant implementation MUST pass these tests.

The tests are organized by invariant:
1. test_exact_arithmetic.py - Exactness and inverse laws of the engine and entities
2. test_formatting.py - Shape and rounding guarantees of rendered strings
3. test_overflow.py - The uint256 ceiling on amounts

These tests use hypothesis for property-based testing.
"""
