"""Decimal domain package.

Contains the exact `Decimal` value type, the transient `DecimalFraction` used by
division, and the variadic reducers built on top of them.
"""
