"""
PropertyData MCP server package.

This package exposes the PropertyData REST API (UK property market analytics,
valuations and area data) as MCP tools:
- Address & UPRN lookup, land registry titles
- Area statistics and demographics
- Prices, valuations and growth
- Rental market, development, planning and financial calculators
- Location, registers, documents and account usage

Every tool is a single GET against https://api.propertydata.co.uk and returns
the remote JSON unmodified.
"""

__version__ = "1.0.0"
