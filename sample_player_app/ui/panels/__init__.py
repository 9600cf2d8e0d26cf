"""
Panels used by the demo window.
"""
