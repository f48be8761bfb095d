"""
Translation Relay package.

Provides:
- A FastAPI relay that forwards text to a public translation endpoint
- Japanese romanization (Hepburn) via pykakasi
- Static front-end serving and placeholder phrase endpoints
"""
