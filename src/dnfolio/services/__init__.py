"""Service layer — post listing, lookup, taxonomies, exports.

All service methods return :class:`~dnfolio.services.result.ServiceResult`.
"""
