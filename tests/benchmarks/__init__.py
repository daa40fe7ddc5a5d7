"""Benchmarks package — uses pytest-benchmark.

Run with::

    pytest tests/benchmarks/ -v --benchmark-sort=median

To check the benchmarks still pass without timing them::

    pytest tests/benchmarks/ --benchmark-disable
"""
