"""
Emissions calculator.

Modules
-------
factors    : Fixed emission factors, benchmarks and horizon divisors.
calculator : calculate_emissions() plus one pure helper per category.
"""
