from concerts.discovery.interfaces import ServiceRegistry
from concerts.discovery.selection import select_endpoint

__all__ = ["ServiceRegistry", "select_endpoint"]
