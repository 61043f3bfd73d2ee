"""Runtime support imported by generated registry modules."""

from registry_codegen.runtime.keyed import Keyed
from registry_codegen.runtime.namespace_id import NamespaceID
from registry_codegen.runtime.registries import DuplicateRegistrationError, Registry

__all__ = ["DuplicateRegistrationError", "Keyed", "NamespaceID", "Registry"]
