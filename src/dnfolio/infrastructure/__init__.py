"""Infrastructure layer — filesystem scanning, content indexing, templates.

Bridges the filesystem to the domain models. The service layer consumes
it through :class:`~dnfolio.infrastructure.site.Site`.
"""
