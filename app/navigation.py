"""
Scene navigation.

The chain is data, not code: TRANSITIONS maps (scene, action) -> next scene.
Views never mutate selection state in place; they derive a new SceneContext
from the one they were rendered with.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


logger = logging.getLogger(__name__)


class Scene(str, Enum):
    OVERVIEW = "overview"
    LISTINGS = "listings"
    REVIEWS = "reviews"
    INSIGHTS = "insights"


class Action(str, Enum):
    BACK = "back"
    NEXT = "next"
    RESTART = "restart"


class NavigationError(ValueError):
    pass


SCENE_TITLES = {
    Scene.OVERVIEW: "Overview of Listings by Neighbourhood",
    Scene.LISTINGS: "Listings in {neighbourhood}",
    Scene.REVIEWS: "Reviews for {listing_name}",
    Scene.INSIGHTS: "Aggregated Insights",
}

ACTION_LABELS = {
    Action.BACK: "Back",
    Action.NEXT: "Next",
    Action.RESTART: "Start over",
}

TRANSITIONS: dict[tuple[Scene, Action], Scene] = {
    (Scene.OVERVIEW, Action.NEXT): Scene.LISTINGS,
    (Scene.LISTINGS, Action.BACK): Scene.OVERVIEW,
    (Scene.LISTINGS, Action.NEXT): Scene.REVIEWS,
    (Scene.REVIEWS, Action.BACK): Scene.LISTINGS,
    (Scene.REVIEWS, Action.NEXT): Scene.INSIGHTS,
    (Scene.INSIGHTS, Action.BACK): Scene.REVIEWS,
    (Scene.INSIGHTS, Action.RESTART): Scene.OVERVIEW,
}

INITIAL_SCENE = Scene.OVERVIEW


@dataclass(frozen=True)
class SceneContext:
    scene: Scene = INITIAL_SCENE
    neighbourhood: Optional[str] = None
    listing_id: Optional[str] = None
    listing_name: Optional[str] = None

    @property
    def title(self) -> str:
        return SCENE_TITLES[self.scene].format(
            neighbourhood=self.neighbourhood or "—",
            listing_name=self.listing_name or self.listing_id or "—",
        )


def available_actions(scene: Scene) -> list[Action]:
    """Actions to render as buttons for a scene, in display order."""
    return [a for a in (Action.BACK, Action.NEXT, Action.RESTART) if (scene, a) in TRANSITIONS]


def transition(ctx: SceneContext, action: Action | str) -> SceneContext:
    try:
        action = Action(action)
        target = TRANSITIONS[(ctx.scene, action)]
    except (ValueError, KeyError):
        raise NavigationError(f"No transition from {ctx.scene.value!r} on {action!r}") from None

    logger.debug("Navigate %s --%s--> %s", ctx.scene.value, action.value, target.value)
    if target == INITIAL_SCENE and action == Action.RESTART:
        return SceneContext()
    return replace(ctx, scene=target)


def missing_selection(ctx: SceneContext) -> Optional[str]:
    """
    Name of the selection a scene needs but does not have, or None.
    Insights aggregates the full dataset and needs nothing.
    """
    if ctx.scene in (Scene.LISTINGS, Scene.REVIEWS) and not ctx.neighbourhood:
        return "neighbourhood"
    if ctx.scene == Scene.REVIEWS and not ctx.listing_id:
        return "listing"
    return None


def can_transition(ctx: SceneContext, action: Action | str) -> bool:
    try:
        nxt = transition(ctx, action)
    except NavigationError:
        return False
    return missing_selection(nxt) is None


def select_neighbourhood(ctx: SceneContext, neighbourhood: str) -> SceneContext:
    # A listing only makes sense inside the neighbourhood it was picked from
    if neighbourhood == ctx.neighbourhood:
        return ctx
    return replace(ctx, neighbourhood=neighbourhood, listing_id=None, listing_name=None)


def select_listing(ctx: SceneContext, listing_id: str, listing_name: Optional[str] = None) -> SceneContext:
    return replace(ctx, listing_id=str(listing_id), listing_name=listing_name)
