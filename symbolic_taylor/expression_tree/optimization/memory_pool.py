from typing import TYPE_CHECKING, Optional, Hashable
import threading
import weakref

if TYPE_CHECKING:
  from ..core.node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode, PowConstNode, ConstPowNode


class NodePool:
  """Hash-consing table for expression nodes.

  Nodes are keyed by variant, payload and the identity of their (already
  interned) children, so structurally identical subtrees built through the
  pool are the same object. Values are held weakly: a node disappears from
  the table once nothing else references it.
  """

  def __init__(self, enabled: bool = True):
    self.enabled = enabled
    self._table: 'weakref.WeakValueDictionary[Hashable, Node]' = weakref.WeakValueDictionary()
    self._lock = threading.Lock()
    self.hits = 0
    self.misses = 0

  def _intern(self, key: Hashable, factory) -> 'Node':
    if not self.enabled:
      return factory()
    with self._lock:
      node = self._table.get(key)
      if node is not None:
        self.hits += 1
        return node
      node = factory()
      self._table[key] = node
      self.misses += 1
      return node

  def get_variable_node(self) -> 'VariableNode':
    from ..core.node import VariableNode
    return self._intern(('x',), VariableNode)

  def get_constant_node(self, value: float) -> 'ConstantNode':
    from ..core.node import ConstantNode
    value = float(value)
    # Bit-exact key: keeps 0.0 and -0.0 apart
    return self._intern(('c', value.hex()), lambda: ConstantNode(value))

  def get_binary_node(self, operator: str, left: 'Node', right: 'Node') -> 'BinaryOpNode':
    from ..core.node import BinaryOpNode
    return self._intern((operator, id(left), id(right)), lambda: BinaryOpNode(operator, left, right))

  def get_unary_node(self, operator: str, operand: 'Node') -> 'UnaryOpNode':
    from ..core.node import UnaryOpNode
    return self._intern((operator, id(operand)), lambda: UnaryOpNode(operator, operand))

  def get_pow_const_node(self, base: 'Node', exponent: float) -> 'PowConstNode':
    from ..core.node import PowConstNode
    exponent = float(exponent)
    return self._intern(('^c', id(base), exponent.hex()), lambda: PowConstNode(base, exponent))

  def get_const_pow_node(self, base: float, exponent: 'Node') -> 'ConstPowNode':
    from ..core.node import ConstPowNode
    base = float(base)
    return self._intern(('c^', base.hex(), id(exponent)), lambda: ConstPowNode(base, exponent))

  def get_stats(self) -> dict:
    """Get pool statistics"""
    return {
      'live_nodes': len(self._table),
      'hits': self.hits,
      'misses': self.misses,
      'enabled': self.enabled,
    }

  def clear(self):
    """Forget every interned node"""
    with self._lock:
      self._table.clear()
      self.hits = 0
      self.misses = 0


# Global instance - process-local initialization with optimized locking
_GLOBAL_POOL: Optional[NodePool] = None
_INITIALIZED = False
_POOL_LOCK = threading.Lock()


def get_global_pool() -> NodePool:
  """Get the global pool instance, creating it from the current config"""
  global _GLOBAL_POOL, _INITIALIZED

  # Fast path - no locking needed once initialized
  if _INITIALIZED and _GLOBAL_POOL is not None:
    return _GLOBAL_POOL

  with _POOL_LOCK:
    if not _INITIALIZED or _GLOBAL_POOL is None:
      from ...config import get_config
      _GLOBAL_POOL = NodePool(enabled=get_config().intern_nodes)
      _INITIALIZED = True

  return _GLOBAL_POOL


def clear_global_pool():
  """Clear the global pool; the next access rebuilds it from config"""
  global _GLOBAL_POOL, _INITIALIZED
  with _POOL_LOCK:
    if _GLOBAL_POOL is not None:
      _GLOBAL_POOL.clear()
    _GLOBAL_POOL = None
    _INITIALIZED = False


def reset_global_pool():
  """Drop the global pool without clearing it (e.g. in a forked child)"""
  global _GLOBAL_POOL, _INITIALIZED
  _GLOBAL_POOL = None
  _INITIALIZED = False
