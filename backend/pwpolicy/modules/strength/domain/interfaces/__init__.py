from .common_password_lookup import CommonPasswordLookup, never_common

__all__ = ["CommonPasswordLookup", "never_common"]
