"""Registration, login, JWT dependencies and password reset."""
