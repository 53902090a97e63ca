"""Foundation: errors, result type and configuration shared by every layer."""
