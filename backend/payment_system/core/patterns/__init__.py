"""
Design Patterns Module

Shared pattern implementations used by the payment system.
Currently includes:
- Singleton Pattern: one process-wide instance for managers such as the
  payment, config and service managers
"""

from .singleton import Singleton, SingletonMeta, SingletonABCMeta

__all__ = ["Singleton", "SingletonMeta", "SingletonABCMeta"]
