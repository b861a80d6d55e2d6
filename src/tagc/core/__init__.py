"""
Core Package.

Contains the tag compilation front end:
- Token and Command model
- Tag Lexer
- Parser/Emission Context
- Tag Registry and Plugin Loader
- Compilation Driver
"""
