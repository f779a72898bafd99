"""
Application core: lifespan, CORS, middlewares and exception handlers.
"""
