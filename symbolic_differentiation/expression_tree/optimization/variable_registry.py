from typing import Dict, List, Optional
import threading

from ..core.tokens import VariableToken


class VariableRegistry:
  """Interns variable tokens: one canonical VariableToken per name.

  Entries are only ever added, so memory is bounded by the number of
  distinct names seen. Pass an instance explicitly to keep its scope local;
  get_global_registry() provides the process-wide default.
  """

  def __init__(self):
    self._variables: Dict[str, VariableToken] = {}
    self._lock = threading.Lock()

  def get(self, name: str) -> VariableToken:
    """Return the canonical token for name, creating it on first lookup"""
    token = self._variables.get(name)
    if token is not None:
      return token
    with self._lock:
      token = self._variables.get(name)
      if token is None:
        token = VariableToken(name)
        self._variables[name] = token
      return token

  def __contains__(self, name: str) -> bool:
    return name in self._variables

  def __len__(self) -> int:
    return len(self._variables)

  def names(self) -> List[str]:
    return list(self._variables)

  def get_stats(self) -> dict:
    return {'variable_count': len(self._variables)}


# Global instance - created lazily under a lock
_GLOBAL_REGISTRY: Optional[VariableRegistry] = None
_REGISTRY_LOCK = threading.Lock()


def get_global_registry() -> VariableRegistry:
  """Get the process-wide registry, creating it on first use"""
  global _GLOBAL_REGISTRY

  # Fast path - no locking needed once initialized
  if _GLOBAL_REGISTRY is not None:
    return _GLOBAL_REGISTRY

  with _REGISTRY_LOCK:
    if _GLOBAL_REGISTRY is None:
      _GLOBAL_REGISTRY = VariableRegistry()

  return _GLOBAL_REGISTRY


def clear_global_registry():
  """Drop the process-wide registry; the next lookup starts a fresh one"""
  global _GLOBAL_REGISTRY
  with _REGISTRY_LOCK:
    _GLOBAL_REGISTRY = None


def resolve_registry(registry: Optional[VariableRegistry]) -> VariableRegistry:
  return get_global_registry() if registry is None else registry
