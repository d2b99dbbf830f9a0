# users_service/messages.py
"""
User-facing message strings.
Existing clients match on these texts, so they must stay stable.
"""

UserNotFound = "User not found"
AddresNotInUser = "User does not have the specified address."
InvalidEmail = "Invalid email format"
EmailInUse = "Email is already in use"
InvalidPostalCode = "Invalid postal code format"
InvalidPagination = "Page and limit must be greater than 0."
InvalidCredentials = "Invalid email or password."
NotAuthenticated = "Not authenticated"
InvalidToken = "Invalid or expired token"
Forbidden = "Insufficient permissions"
StorageUnavailable = "Storage is temporarily unavailable"
StorageConflict = "The resource was modified concurrently, please retry"
Unexpected = "Something went wrong"
