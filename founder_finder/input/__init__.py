"""
Input parsing utilities.

This package contains code for parsing the company list.
"""

from .company_parser import parse_company_file, parse_company_line, parse_company_lines

__all__ = ["parse_company_file", "parse_company_line", "parse_company_lines"]
