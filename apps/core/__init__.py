"""
Shared building blocks for every marketplace app.

- Error kinds and the envelope exception handler
- The {data, error} response renderer
- Pagination styles
- Request logging middleware
- Health and readiness probes
"""
