"""
API layer for the user service.

Exposes the HTTP endpoints under /user (create, edit, delete, list,
profile image upload).
"""
