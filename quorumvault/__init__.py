"""
Quorum Vault - Threshold Authorization Engine

A small group's collective authorization over proposed transfers,
enforcing an m-of-n approval rule before any proposal is executed.

Core properties:
- Only configured members may propose, approve or execute
- Approvals are unique per member and recorded in arrival order
- Execution happens exactly once, and only after quorum is met
- Every rejection leaves prior state untouched
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
