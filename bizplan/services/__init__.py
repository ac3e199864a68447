"""Services — SelectionStateManager, PlanningService."""

from bizplan.services.selection_service import SELECTION_KEY, SelectionStateManager
from bizplan.services.planning_service import PlanningService, build_planning_service

__all__ = ["SELECTION_KEY", "SelectionStateManager", "PlanningService", "build_planning_service"]
