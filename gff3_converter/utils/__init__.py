#!/usr/bin/env python3

"""
Utility modules for the GFF3 converters.
"""
