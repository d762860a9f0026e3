"""
FastAPI routers for the quizbank service.

Each module exposes an APIRouter included by the app factory (app.py).
"""
