"""
Storage collaborators used by the domain service.
Each method maps Tortoise failures onto StorageConflictError / StorageUnavailableError.
"""
from .users import UserRepository
from .addresses import AddressRepository
from .roles import RoleRepository
