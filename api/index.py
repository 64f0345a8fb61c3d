"""
Vercel serverless function: /api/beta-register
The Python runtime serves the ASGI app exported as `app`.
"""

from beta_signup.main import app  # noqa: F401
