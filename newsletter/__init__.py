"""Newsletter API: article publishing service."""
