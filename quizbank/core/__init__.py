"""
Core utilities shared across the quizbank service.

This package hosts configuration (env vars, paths, backend selection) and
logging setup, so routers and repositories never read os.environ directly.
"""
