"""
Shared constants for profile image uploads.

Used by the image store and the upload use case. Single place for easier updates.
"""

# -----------------------------------------------------------------------------
# Profile images
# -----------------------------------------------------------------------------
ALLOWED_IMAGE_MIME = frozenset({"image/jpeg", "image/jpg", "image/png", "image/gif"})

# Pillow format names accepted after decoding the stored file
ALLOWED_IMAGE_FORMATS = frozenset({"JPEG", "PNG", "GIF"})

UPLOAD_CHUNK_SIZE = 1024 * 1024
BYTES_PER_MB = 1024 * 1024

# Extra attempts with a random suffix when a generated name is already taken
NAME_COLLISION_RETRIES = 5
