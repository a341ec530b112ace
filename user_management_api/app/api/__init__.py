"""
API package containing versioned routes.

API versions live in subpackages such as ``v1``; each exposes a
``router`` that ``main.create_app`` mounts on the application.
"""
