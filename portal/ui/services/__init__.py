"""UI service layer.

One async function per API operation, named ``<verb>_<noun>_service`` and
taking the :class:`~portal.client.http.ApiClient` as last argument, plus the
pure helpers pages use to shape what they render.
"""
