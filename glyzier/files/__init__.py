"""Product file upload and download."""
