"""
Receipt data handling module.

Decodes submitted receipt payloads into canonical models and checks them
for structural completeness before scoring.
"""
