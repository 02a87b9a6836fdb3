#!/usr/bin/env python3
"""
Main script for running the business statistics calculators.
"""

# Pipeline overview:
# 1) Read comma-separated input, an uploaded CSV/XLSX/XLS table or a
#    built-in sample, and normalise it into a weighted dataset or paired
#    dataset.
# 2) Run the requested engine (descriptive measures, correlation or outlier
#    detection); every engine is a pure function of its input.
# 3) Print the summary and optionally export tables and charts.

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from bizstat.cli import configure_logging, main

if __name__ == "__main__":
    configure_logging(log_file="bizstat.log")
    sys.exit(main())
