# Routes package init
"""
Users API Backend — API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - health.py:  GET  /                     (service info)
                  GET  /health               (liveness check)
    - users.py:   GET  /api/users            (list users)
                  GET  /api/users/{id}       (get one user)
                  POST /api/users            (create user)
                  PUT  /api/users/{id}       (update user)
                  DELETE /api/users/{id}     (delete user)

Design Principle:
    Routes are THIN: they extract path and body data, call the service,
    and pick the status code. Business rules live in app.services.
"""
