from app.api.endpoints import vehicles

__all__ = ['vehicles']
