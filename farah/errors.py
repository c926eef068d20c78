from __future__ import annotations


class FetchError(RuntimeError):
    """A read from the data store failed. Distinct from "no rows"."""


class VendorFetchError(FetchError):
    pass


class ProfileFetchError(FetchError):
    pass
