# story_social/engines/__init__.py
"""
In-memory merge logic for comment forests and story reactions.
No I/O happens in this package.
"""
