"""
Xibo CMS API Tools

All tools for interacting with the Xibo CMS API, organized by resource type.
Each tool is an Endpoint description turned into a Claude Agent SDK @tool.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from claude_agent_sdk import tool

from . import schemas
from .client import get_client
from .endpoint import FILE, Endpoint, Param, ToolResult
from .errors import XiboError
from .tree import flatten_tree, render_tree

logger = logging.getLogger(__name__)


def _json_response(data: Any) -> dict[str, Any]:
    """Helper to create a JSON response."""
    return {"content": [{"type": "text", "text": json.dumps(data, indent=2, ensure_ascii=False)}]}


def _error_response(error: str) -> dict[str, Any]:
    """Helper to create an error response."""
    return {"content": [{"type": "text", "text": f"Error: {error}"}], "is_error": True}


def _result_response(result: ToolResult) -> dict[str, Any]:
    """Helper to turn a ToolResult into a tool response."""
    response = _json_response(result.to_dict())
    if not result.success:
        response["is_error"] = True
    return response


def _make_tool(endpoint: Endpoint) -> Any:
    """Wrap an Endpoint as an SDK tool."""

    async def handler(args: dict[str, Any]) -> dict[str, Any]:
        try:
            result = await endpoint.execute(get_client(), args)
        except XiboError as e:
            result = ToolResult.from_error(e)
        except Exception as e:
            logger.exception(f"Unexpected error in {endpoint.name}")
            return _error_response(str(e))
        return _result_response(result)

    handler.__name__ = endpoint.name
    handler.__doc__ = endpoint.description
    return tool(endpoint.name, endpoint.description, endpoint.input_schema)(handler)


def _folder_tree(data: Any) -> dict[str, Any]:
    nodes = data if isinstance(data, list) else []
    return {
        "tree": flatten_tree(nodes),
        "treeViewText": render_tree(nodes, label=lambda n: f"{n.get('text')} (ID: {n.get('id')})"),
    }


# =============================================================================
# ACTIONS
# =============================================================================

GET_ACTIONS = Endpoint(
    "get_actions",
    "Search interactive actions (touch/webhook triggers) by id, owner, trigger, source or target.",
    "GET", "/api/action",
    params=(
        Param("actionId", int),
        Param("ownerId", int),
        Param("triggerType", str, description="touch or webhook"),
        Param("triggerCode", str),
        Param("actionType", str, description="e.g. next, previous, navLayout, navWidget"),
        Param("source", str, description="layout, region or widget"),
        Param("sourceId", int),
        Param("target", str, description="region or screen"),
        Param("targetId", int),
        Param("layoutId", int),
        Param("sourceOrTargetId", int),
    ),
    response=schemas.Action, many=True,
)

ADD_ACTION = Endpoint(
    "add_action",
    "Add an interactive action to a layout, region or widget.",
    "POST", "/api/action",
    params=(
        Param("layoutId", int, required=True),
        Param("actionType", str, required=True),
        Param("target", str, required=True, description="region or screen"),
        Param("targetId", int),
        Param("source", str, description="layout, region or widget"),
        Param("sourceId", int),
        Param("triggerType", str, description="touch or webhook"),
        Param("triggerCode", str),
        Param("widgetId", int),
        Param("layoutCode", str),
    ),
    response=schemas.Action,
)

DELETE_ACTION = Endpoint(
    "delete_action",
    "Delete an action by ID.",
    "DELETE", "/api/action/{actionId}",
    params=(Param("actionId", int, required=True),),
    success_message="Action deleted successfully.",
)


# =============================================================================
# DISPLAYS
# =============================================================================

GET_DISPLAYS = Endpoint(
    "get_displays",
    "List displays with optional filtering by id, name, tags, status, client type or folder.",
    "GET", "/api/display",
    params=(
        Param("displayId", int),
        Param("displayGroupId", int),
        Param("display", str, description="Filter by display name"),
        Param("tags", str),
        Param("exactTags", int),
        Param("logicalOperator", str, enum=("AND", "OR")),
        Param("macAddress", str),
        Param("hardwareKey", str),
        Param("clientVersion", str),
        Param("clientType", str),
        Param("clientCode", str),
        Param("embed", str, description="Comma separated child objects to embed, e.g. displaygroups"),
        Param("authorised", int),
        Param("displayProfileId", int),
        Param("mediaInventoryStatus", int, description="1 up to date, 2 downloading, 3 out of date"),
        Param("loggedIn", int),
        Param("lastAccessed", str, description="Y-m-d H:i:s"),
        Param("folderId", int),
        Param("xmrRegistered", int),
        Param("isPlayerSupported", int),
    ),
    response=schemas.Display, many=True,
)

EDIT_DISPLAY = Endpoint(
    "edit_display",
    "Edit a display's name, licence state, default layout, alerts and location.",
    "PUT", "/api/display/{displayId}",
    params=(
        Param("displayId", int, required=True),
        Param("display", str, required=True, description="Display name"),
        Param("license", str, required=True, description="Hardware key of the display"),
        Param("licensed", int, description="1 to authorise the display"),
        Param("defaultLayoutId", int),
        Param("description", str),
        Param("tags", str),
        Param("incSchedule", int),
        Param("emailAlert", int),
        Param("alertTimeout", int),
        Param("wakeOnLanEnabled", int),
        Param("latitude", float),
        Param("longitude", float),
        Param("timeZone", str),
        Param("displayProfileId", int),
        Param("folderId", int),
    ),
    response=schemas.Display,
)

DELETE_DISPLAY = Endpoint(
    "delete_display",
    "Delete a display. Irreversible.",
    "DELETE", "/api/display/{displayId}",
    params=(Param("displayId", int, required=True),),
    success_message="Display deleted successfully.",
)

REQUEST_DISPLAY_SCREENSHOT = Endpoint(
    "request_display_screenshot",
    "Ask a display to upload a screenshot on its next collection.",
    "PUT", "/api/display/requestscreenshot/{displayId}",
    params=(Param("displayId", int, required=True),),
    success_message="Screenshot requested.",
)

WAKE_DISPLAY_ON_LAN = Endpoint(
    "wake_display_on_lan",
    "Send a Wake On LAN packet to a display.",
    "POST", "/api/display/wol/{displayId}",
    params=(Param("displayId", int, required=True),),
    success_message="Wake On LAN sent.",
)

AUTHORISE_DISPLAY = Endpoint(
    "authorise_display",
    "Toggle the authorised (licensed) state of a display.",
    "PUT", "/api/display/authorise/{displayId}",
    params=(Param("displayId", int, required=True),),
    success_message="Display authorisation toggled.",
)

SET_DEFAULT_LAYOUT_FOR_DISPLAY = Endpoint(
    "set_default_layout_for_display",
    "Set the default layout shown by a display when nothing is scheduled.",
    "PUT", "/api/display/defaultlayout/{displayId}",
    params=(
        Param("displayId", int, required=True),
        Param("layoutId", int, required=True),
    ),
    success_message="Default layout set.",
)


# =============================================================================
# DISPLAY GROUPS
# =============================================================================

GET_DISPLAY_GROUPS = Endpoint(
    "get_display_groups",
    "List display groups with optional filtering.",
    "GET", "/api/displaygroup",
    params=(
        Param("displayGroupId", int),
        Param("displayGroup", str),
        Param("displayId", int),
        Param("nestedDisplayId", int),
        Param("dynamicCriteria", str),
        Param("tags", str),
        Param("exactTags", int),
        Param("isDisplaySpecific", int),
        Param("forSchedule", int),
        Param("folderId", int),
    ),
    response=schemas.DisplayGroup, many=True,
)

_DISPLAY_GROUP_FIELDS = (
    Param("displayGroup", str, required=True, description="Display group name"),
    Param("description", str),
    Param("tags", str),
    Param("isDynamic", bool),
    Param("dynamicCriteria", str),
    Param("dynamicCriteriaTags", str),
    Param("folderId", int),
)

ADD_DISPLAY_GROUP = Endpoint(
    "add_display_group",
    "Create a display group, optionally dynamic (membership by name/tag criteria).",
    "POST", "/api/displaygroup",
    params=_DISPLAY_GROUP_FIELDS,
    response=schemas.DisplayGroup,
)

EDIT_DISPLAY_GROUP = Endpoint(
    "edit_display_group",
    "Edit a display group.",
    "PUT", "/api/displaygroup/{displayGroupId}",
    params=(Param("displayGroupId", int, required=True),) + _DISPLAY_GROUP_FIELDS,
    response=schemas.DisplayGroup,
)

DELETE_DISPLAY_GROUP = Endpoint(
    "delete_display_group",
    "Delete a display group.",
    "DELETE", "/api/displaygroup/{displayGroupId}",
    params=(Param("displayGroupId", int, required=True),),
    success_message="Display group deleted successfully.",
)

ASSIGN_DISPLAYS_TO_DISPLAY_GROUP = Endpoint(
    "assign_displays_to_display_group",
    "Add displays to a (non-dynamic) display group.",
    "POST", "/api/displaygroup/{displayGroupId}/display/assign",
    params=(
        Param("displayGroupId", int, required=True),
        Param("displayIds", list, required=True, wire_name="displayId", style="brackets"),
    ),
    success_message="Displays assigned to display group.",
)

UNASSIGN_DISPLAYS_FROM_DISPLAY_GROUP = Endpoint(
    "unassign_displays_from_display_group",
    "Remove displays from a display group.",
    "POST", "/api/displaygroup/{displayGroupId}/display/unassign",
    params=(
        Param("displayGroupId", int, required=True),
        Param("displayIds", list, required=True, wire_name="displayId", style="brackets"),
    ),
    success_message="Displays unassigned from display group.",
)

COPY_DISPLAY_GROUP = Endpoint(
    "copy_display_group",
    "Copy a display group, optionally with its displays, schedule and tags.",
    "POST", "/api/displaygroup/{displayGroupId}/copy",
    params=(
        Param("displayGroupId", int, required=True),
        Param("name", str, required=True, wire_name="displayGroup"),
        Param("description", str),
        Param("copyMembers", bool),
        Param("copyAssignments", bool),
        Param("copyTags", bool),
        Param("folderId", int),
    ),
    response=schemas.DisplayGroup,
)

COLLECT_NOW_FOR_DISPLAY_GROUP = Endpoint(
    "collect_now_for_display_group",
    "Tell every display in a group to collect from the CMS immediately.",
    "POST", "/api/displaygroup/{displayGroupId}/action/collectNow",
    params=(Param("displayGroupId", int, required=True),),
    success_message="Collect now sent.",
)


# =============================================================================
# DISPLAY PROFILES
# =============================================================================

GET_DISPLAY_PROFILES = Endpoint(
    "get_display_profiles",
    "List display profiles (player settings per client type).",
    "GET", "/api/displayprofile",
    params=(
        Param("displayProfileId", int),
        Param("displayProfile", str, description="Filter by name"),
        Param("type", str, description="Client type, e.g. android, windows, linux"),
        Param("embed", str, description="config, commands, configWithDefault"),
    ),
    response=schemas.DisplayProfile, many=True,
)

EDIT_DISPLAY_PROFILE = Endpoint(
    "edit_display_profile",
    "Rename a display profile or make it the default for its client type.",
    "PUT", "/api/displayprofile/{displayProfileId}",
    params=(
        Param("displayProfileId", int, required=True),
        Param("name", str, required=True),
        Param("type", str, required=True),
        Param("isDefault", int, required=True),
    ),
    response=schemas.DisplayProfile,
    success_message="Display profile updated successfully.",
)

DELETE_DISPLAY_PROFILE = Endpoint(
    "delete_display_profile",
    "Delete a display profile.",
    "DELETE", "/api/displayprofile/{displayProfileId}",
    params=(Param("displayProfileId", int, required=True),),
    success_message="Display profile deleted successfully.",
)


# =============================================================================
# SYNC GROUPS
# =============================================================================

GET_SYNC_GROUPS = Endpoint(
    "get_sync_groups",
    "List sync groups (displays playing content in lockstep).",
    "GET", "/api/syncgroups",
    params=(
        Param("syncGroupId", int),
        Param("name", str),
        Param("ownerId", int),
        Param("folderId", int),
    ),
    response=schemas.SyncGroup, many=True,
)

ADD_SYNC_GROUP = Endpoint(
    "add_sync_group",
    "Create a sync group.",
    "POST", "/api/syncgroup/add",
    params=(
        Param("name", str, required=True),
        Param("syncPublisherPort", int, description="Defaults to 9590"),
        Param("folderId", int),
    ),
    response=schemas.SyncGroup,
)

EDIT_SYNC_GROUP = Endpoint(
    "edit_sync_group",
    "Edit a sync group and choose its lead display.",
    "PUT", "/api/syncgroup/{syncGroupId}/edit",
    params=(
        Param("syncGroupId", int, required=True),
        Param("name", str, required=True),
        Param("leadDisplayId", int, required=True),
        Param("syncPublisherPort", int),
        Param("syncSwitchDelay", int),
        Param("syncVideoPauseDelay", int),
        Param("folderId", int),
    ),
    response=schemas.SyncGroup,
)

GET_SYNC_GROUP_DISPLAYS = Endpoint(
    "get_sync_group_displays",
    "List the displays in a sync group.",
    "GET", "/api/syncgroup/{syncGroupId}/displays",
    params=(
        Param("syncGroupId", int, required=True),
        Param("displayId", int),
        Param("displayGroupId", int),
    ),
    response=schemas.Display, many=True,
)


# =============================================================================
# LAYOUTS
# =============================================================================

GET_LAYOUTS = Endpoint(
    "get_layouts",
    "Search layouts by id, name, tags, owner, status, campaign or folder.",
    "GET", "/api/layout",
    params=(
        Param("layoutId", int),
        Param("parentId", int),
        Param("showDrafts", int),
        Param("layout", str, description="Filter by layout name"),
        Param("userId", int),
        Param("retired", int),
        Param("tags", str),
        Param("exactTags", int),
        Param("ownerUserGroupId", int),
        Param("publishedStatusId", int, description="1 published, 2 draft"),
        Param("embed", str, description="e.g. regions,playlists,widgets,tags"),
        Param("campaignId", int),
        Param("folderId", int),
    ),
    response=schemas.Layout, many=True,
)

ADD_LAYOUT = Endpoint(
    "add_layout",
    "Create a layout from a resolution or an existing template.",
    "POST", "/api/layout",
    params=(
        Param("name", str, required=True),
        Param("description", str),
        Param("layoutId", int, description="Template layout to base the new layout on"),
        Param("resolutionId", int),
        Param("returnDraft", bool),
        Param("code", str),
        Param("folderId", int),
    ),
    response=schemas.Layout,
)

EDIT_LAYOUT = Endpoint(
    "edit_layout",
    "Edit layout properties (name, description, tags, retired flag, code).",
    "PUT", "/api/layout/{layoutId}",
    params=(
        Param("layoutId", int, required=True),
        Param("name", str, required=True),
        Param("description", str),
        Param("tags", str),
        Param("retired", int),
        Param("enableStat", int),
        Param("code", str),
        Param("folderId", int),
    ),
    response=schemas.Layout,
)

DELETE_LAYOUT = Endpoint(
    "delete_layout",
    "Delete a layout. Irreversible.",
    "DELETE", "/api/layout/{layoutId}",
    params=(Param("layoutId", int, required=True),),
    success_message="Layout deleted successfully.",
)

PUBLISH_LAYOUT = Endpoint(
    "publish_layout",
    "Publish the draft of a layout, now or at a given date.",
    "PUT", "/api/layout/publish/{layoutId}",
    params=(
        Param("layoutId", int, required=True, description="ID of the parent (published) layout"),
        Param("publishNow", bool),
        Param("publishDate", str, description="Y-m-d H:i:s"),
    ),
    success_message="Layout published.",
)

CHECKOUT_LAYOUT = Endpoint(
    "checkout_layout",
    "Check out a published layout so it can be edited as a draft.",
    "PUT", "/api/layout/checkout/{layoutId}",
    params=(Param("layoutId", int, required=True),),
    response=schemas.Layout,
)

DISCARD_LAYOUT = Endpoint(
    "discard_layout",
    "Discard the draft of a checked-out layout.",
    "PUT", "/api/layout/discard/{layoutId}",
    params=(Param("layoutId", int, required=True),),
    success_message="Layout draft discarded.",
)

RETIRE_LAYOUT = Endpoint(
    "retire_layout",
    "Retire a layout so it can no longer be scheduled.",
    "PUT", "/api/layout/retire/{layoutId}",
    params=(Param("layoutId", int, required=True),),
    success_message="Layout retired.",
)

UNRETIRE_LAYOUT = Endpoint(
    "unretire_layout",
    "Bring a retired layout back into use.",
    "PUT", "/api/layout/unretire/{layoutId}",
    params=(Param("layoutId", int, required=True),),
    success_message="Layout unretired.",
)

COPY_LAYOUT = Endpoint(
    "copy_layout",
    "Copy a layout under a new name.",
    "POST", "/api/layout/copy/{layoutId}",
    params=(
        Param("layoutId", int, required=True),
        Param("name", str, required=True),
        Param("description", str),
        Param("copyMediaFiles", bool),
    ),
    response=schemas.Layout,
)


# =============================================================================
# REGIONS
# =============================================================================

ADD_REGION = Endpoint(
    "add_region",
    "Add a region to a draft layout (checkout the layout first).",
    "POST", "/api/region/{layoutId}",
    params=(
        Param("layoutId", int, required=True, description="ID of the draft layout"),
        Param("type", str, enum=("zone", "frame", "playlist", "canvas"), description="Defaults to frame"),
        Param("width", int),
        Param("height", int),
        Param("top", int),
        Param("left", int),
    ),
    response=schemas.Region,
)

EDIT_REGION = Endpoint(
    "edit_region",
    "Move, resize or rename a region and set its transition and loop.",
    "PUT", "/api/region/{regionId}",
    params=(
        Param("regionId", int, required=True),
        Param("loop", int, required=True, description="1 to loop a single item"),
        Param("name", str),
        Param("width", int),
        Param("height", int),
        Param("top", int),
        Param("left", int),
        Param("zIndex", int),
        Param("transitionType", str),
        Param("transitionDuration", int, description="Milliseconds"),
        Param("transitionDirection", str),
    ),
    response=schemas.Region,
)

DELETE_REGION = Endpoint(
    "delete_region",
    "Delete a region from a draft layout.",
    "DELETE", "/api/region/{regionId}",
    params=(Param("regionId", int, required=True),),
    success_message="Region deleted successfully.",
)


# =============================================================================
# PLAYLISTS
# =============================================================================

GET_PLAYLISTS = Endpoint(
    "get_playlists",
    "Search playlists, optionally embedding their widgets.",
    "GET", "/api/playlist",
    params=(
        Param("playlistId", int),
        Param("name", str),
        Param("userId", int),
        Param("tags", str),
        Param("exactTags", int),
        Param("logicalOperator", str, enum=("AND", "OR")),
        Param("ownerUserGroupId", int),
        Param("embed", str, description="regions, widgets, permissions, tags"),
        Param("folderId", int),
    ),
    response=schemas.Playlist, many=True,
)

_PLAYLIST_FIELDS = (
    Param("name", str, required=True),
    Param("tags", str, description="Comma separated tags"),
    Param("isDynamic", int, description="1 to fill the playlist from media filters"),
    Param("filterMediaName", str),
    Param("logicalOperatorName", str, enum=("AND", "OR")),
    Param("filterMediaTag", str),
    Param("exactTags", int),
    Param("logicalOperator", str, enum=("AND", "OR")),
    Param("maxNumberOfItems", int),
    Param("folderId", int),
)

ADD_PLAYLIST = Endpoint(
    "add_playlist",
    "Create a playlist, static or dynamic.",
    "POST", "/api/playlist",
    params=_PLAYLIST_FIELDS,
    response=schemas.Playlist,
)

EDIT_PLAYLIST = Endpoint(
    "edit_playlist",
    "Edit a playlist.",
    "PUT", "/api/playlist/{playlistId}",
    params=(Param("playlistId", int, required=True),) + _PLAYLIST_FIELDS,
    response=schemas.Playlist,
)

DELETE_PLAYLIST = Endpoint(
    "delete_playlist",
    "Delete a playlist.",
    "DELETE", "/api/playlist/{playlistId}",
    params=(Param("playlistId", int, required=True),),
    success_message="Playlist deleted successfully.",
)

COPY_PLAYLIST = Endpoint(
    "copy_playlist",
    "Copy a playlist under a new name.",
    "POST", "/api/playlist/copy/{playlistId}",
    params=(
        Param("playlistId", int, required=True),
        Param("name", str, required=True),
        Param("copyMediaFiles", bool),
    ),
    response=schemas.Playlist,
)

ASSIGN_LIBRARY_ITEMS = Endpoint(
    "assign_library_items",
    "Add library media to a playlist as widgets.",
    "POST", "/api/playlist/library/assign/{playlistId}",
    params=(
        Param("playlistId", int, required=True),
        Param("mediaIds", list, required=True, wire_name="media", style="brackets"),
        Param("duration", int, description="Seconds"),
        Param("useDuration", int),
        Param("displayOrder", int),
    ),
    response=schemas.Playlist,
)


# =============================================================================
# WIDGETS
# =============================================================================

ADD_WIDGET = Endpoint(
    "add_widget",
    "Add a widget of a module type (e.g. text, clock, webpage) to a playlist.",
    "POST", "/api/playlist/widget/{type}/{playlistId}",
    params=(
        Param("type", str, required=True, description="Module type"),
        Param("playlistId", int, required=True),
        Param("displayOrder", int),
        Param("templateId", str, description="Template for modules with a data type"),
    ),
    response=schemas.Widget,
    success_message="Widget added successfully.",
)

EDIT_WIDGET = Endpoint(
    "edit_widget",
    "Edit a widget's duration, name, statistics and module properties.",
    "PUT", "/api/playlist/widget/{widgetId}",
    params=(
        Param("widgetId", int, required=True),
        Param("useDuration", int),
        Param("duration", int, description="Seconds"),
        Param("name", str),
        Param("enableStat", str, enum=("On", "Off", "Inherit")),
        Param("isRepeatData", int),
        Param("showFallback", str, enum=("never", "always", "empty", "error")),
        Param("properties", dict, style="fields", description="Module specific options, sent as form fields"),
    ),
    response=schemas.Widget,
    success_message="Widget updated successfully.",
)

DELETE_WIDGET = Endpoint(
    "delete_widget",
    "Delete a widget from its playlist.",
    "DELETE", "/api/playlist/widget/{widgetId}",
    params=(Param("widgetId", int, required=True),),
    success_message="Widget deleted successfully.",
)


# =============================================================================
# CAMPAIGNS
# =============================================================================

GET_CAMPAIGNS = Endpoint(
    "get_campaigns",
    "List campaigns with optional filtering.",
    "GET", "/api/campaign",
    params=(
        Param("campaignId", int),
        Param("name", str),
        Param("tags", str),
        Param("exactTags", int),
        Param("hasLayouts", int),
        Param("isLayoutSpecific", int),
        Param("retired", int),
        Param("totalDuration", int),
        Param("type", str, enum=("list", "ad")),
        Param("embed", str),
        Param("folderId", int),
    ),
    response=schemas.Campaign, many=True,
)

ADD_CAMPAIGN = Endpoint(
    "add_campaign",
    "Create a list or ad campaign, optionally with layouts.",
    "POST", "/api/campaign",
    params=(
        Param("name", str, required=True),
        Param("type", str, enum=("list", "ad")),
        Param("folderId", int),
        Param("layoutIds", list, style="brackets"),
        Param("cyclePlaybackEnabled", int),
        Param("playCount", int),
        Param("listPlayOrder", str, enum=("round", "block")),
        Param("targetType", str, enum=("plays", "budget", "imp")),
        Param("target", int),
        Param("startDt", str),
        Param("endDt", str),
        Param("displayGroupIds", list, style="brackets"),
    ),
    response=schemas.Campaign,
)

EDIT_CAMPAIGN = Endpoint(
    "edit_campaign",
    "Edit a campaign.",
    "PUT", "/api/campaign/{campaignId}",
    params=(
        Param("campaignId", int, required=True),
        Param("name", str, required=True),
        Param("folderId", int),
        Param("manageLayouts", int),
        Param("layoutIds", list, style="brackets"),
        Param("cyclePlaybackEnabled", int),
        Param("playCount", int),
        Param("listPlayOrder", str, enum=("round", "block")),
        Param("targetType", str, enum=("plays", "budget", "imp")),
        Param("target", int),
    ),
    response=schemas.Campaign,
)

DELETE_CAMPAIGN = Endpoint(
    "delete_campaign",
    "Delete a campaign.",
    "DELETE", "/api/campaign/{campaignId}",
    params=(Param("campaignId", int, required=True),),
    success_message="Campaign deleted successfully.",
)

ASSIGN_LAYOUT_TO_CAMPAIGN = Endpoint(
    "assign_layout_to_campaign",
    "Add a layout to a campaign at an optional position.",
    "POST", "/api/campaign/layout/assign/{campaignId}",
    params=(
        Param("campaignId", int, required=True),
        Param("layoutId", int, required=True),
        Param("displayOrder", int),
    ),
    success_message="Layout assigned to campaign.",
)

REMOVE_LAYOUT_FROM_CAMPAIGN = Endpoint(
    "remove_layout_from_campaign",
    "Remove a layout from a campaign.",
    "DELETE", "/api/campaign/layout/remove/{campaignId}",
    params=(
        Param("campaignId", int, required=True),
        Param("layoutId", int, required=True),
        Param("displayOrder", int),
    ),
    success_message="Layout removed from campaign.",
)


# =============================================================================
# SCHEDULES
# =============================================================================

GET_SCHEDULE_EVENTS = Endpoint(
    "get_schedule_events",
    "List scheduled events in a date range, optionally per display group or campaign.",
    "GET", "/api/schedule",
    params=(
        Param("eventTypeId", int),
        Param("fromDt", str, description="Y-m-d H:i:s"),
        Param("toDt", str, description="Y-m-d H:i:s"),
        Param("geoAware", int),
        Param("recurring", int),
        Param("campaignId", int),
        Param("displayGroupIds", list, style="brackets"),
        Param("name", str),
    ),
    response=schemas.ScheduleEvent, many=True,
)

_SCHEDULE_FIELDS = (
    Param("eventTypeId", int, required=True,
          description="1 layout, 2 command, 3 overlay, 4 interrupt, 5 campaign, 6 action, 7 media, 8 playlist"),
    Param("displayGroupIds", list, required=True, style="brackets"),
    Param("campaignId", int),
    Param("commandId", int),
    Param("displayOrder", int),
    Param("isPriority", int),
    Param("dayPartId", int),
    Param("syncTimezone", int),
    Param("fromDt", str, description="Y-m-d H:i:s"),
    Param("toDt", str, description="Y-m-d H:i:s"),
    Param("recurrenceType", str, enum=("Minute", "Hour", "Day", "Week", "Month", "Year")),
    Param("recurrenceDetail", int),
    Param("recurrenceRange", str),
    Param("recurrenceRepeatsOn", str),
    Param("name", str),
    Param("maxPlaysPerHour", int),
    Param("shareOfVoice", int),
)

ADD_SCHEDULE = Endpoint(
    "add_schedule",
    "Schedule a campaign, layout or command on display groups.",
    "POST", "/api/schedule",
    params=_SCHEDULE_FIELDS,
    response=schemas.ScheduleEvent,
)

EDIT_SCHEDULE = Endpoint(
    "edit_schedule",
    "Edit a scheduled event.",
    "PUT", "/api/schedule/{eventId}",
    params=(Param("eventId", int, required=True),) + _SCHEDULE_FIELDS,
    response=schemas.ScheduleEvent,
)

DELETE_SCHEDULE = Endpoint(
    "delete_schedule",
    "Delete a scheduled event.",
    "DELETE", "/api/schedule/{eventId}",
    params=(Param("eventId", int, required=True),),
    success_message="Schedule event deleted successfully.",
)

DELETE_SCHEDULE_RECURRENCE = Endpoint(
    "delete_schedule_recurrence",
    "Delete occurrences of a recurring event.",
    "DELETE", "/api/schedule/{eventId}/recurrence",
    params=(
        Param("eventId", int, required=True),
        Param("deleteAll", bool, description="Delete every occurrence, not only upcoming ones"),
    ),
    success_message="Schedule recurrence deleted successfully.",
)


# =============================================================================
# TAGS
# =============================================================================

GET_TAGS = Endpoint(
    "get_tags",
    "Search tags by id or name.",
    "GET", "/api/tag",
    params=(
        Param("tagId", int),
        Param("tag", str),
        Param("exactTag", str),
        Param("isSystem", int),
        Param("isRequired", int),
        Param("haveOptions", int),
    ),
    response=schemas.Tag, many=True,
    parse_json=("options",),
)

ADD_TAG = Endpoint(
    "add_tag",
    "Create a tag (1-50 characters), optionally required or with predefined values.",
    "POST", "/api/tag",
    params=(
        Param("tag", str, required=True, wire_name="name"),
        Param("isRequired", int, description="1 for required, 0 for optional"),
        Param("options", str, description="Comma separated predefined values"),
    ),
    response=schemas.Tag,
    parse_json=("options",),
)

EDIT_TAG = Endpoint(
    "edit_tag",
    "Edit a tag.",
    "PUT", "/api/tag/{tagId}",
    params=(
        Param("tagId", int, required=True),
        Param("tag", str, required=True, wire_name="name"),
        Param("isRequired", int),
        Param("options", str),
    ),
    response=schemas.Tag,
    parse_json=("options",),
)

DELETE_TAG = Endpoint(
    "delete_tag",
    "Delete a tag.",
    "DELETE", "/api/tag/{tagId}",
    params=(Param("tagId", int, required=True),),
    success_message="Tag deleted successfully.",
)


# =============================================================================
# TEMPLATES
# =============================================================================

GET_TEMPLATES = Endpoint(
    "get_templates",
    "Search layout templates.",
    "GET", "/api/template",
    params=(
        Param("templateId", int),
        Param("template", str),
        Param("tags", str),
        Param("exactTags", int),
        Param("folderId", int),
    ),
    response=schemas.Template, many=True,
)

ADD_TEMPLATE_FROM_LAYOUT = Endpoint(
    "add_template_from_layout",
    "Save an existing layout as a template.",
    "POST", "/api/template/{layoutId}",
    params=(
        Param("layoutId", int, required=True),
        Param("name", str, required=True),
        Param("description", str),
        Param("tags", str),
        Param("includeWidgets", bool),
        Param("folderId", int),
    ),
    response=schemas.Template,
)


# =============================================================================
# USER GROUPS
# =============================================================================

GET_USER_GROUPS = Endpoint(
    "get_user_groups",
    "List user groups.",
    "GET", "/api/group",
    params=(
        Param("userGroupId", int),
        Param("userGroup", str),
    ),
    response=schemas.UserGroup, many=True,
)

_USER_GROUP_FIELDS = (
    Param("group", str, required=True),
    Param("description", str),
    Param("libraryQuota", int, description="Library quota in KB"),
    Param("isSystemNotification", int),
    Param("isDisplayNotification", int),
    Param("isScheduleNotification", int),
    Param("isCustomNotification", int),
    Param("isShownForAddUser", int),
    Param("defaultHomepageId", str),
)

ADD_USER_GROUP = Endpoint(
    "add_user_group",
    "Create a user group.",
    "POST", "/api/group",
    params=_USER_GROUP_FIELDS,
    response=schemas.UserGroup,
)

EDIT_USER_GROUP = Endpoint(
    "edit_user_group",
    "Edit a user group.",
    "PUT", "/api/group/{userGroupId}",
    params=(Param("userGroupId", int, required=True),) + _USER_GROUP_FIELDS,
    response=schemas.UserGroup,
)

DELETE_USER_GROUP = Endpoint(
    "delete_user_group",
    "Delete a user group.",
    "DELETE", "/api/group/{userGroupId}",
    params=(Param("userGroupId", int, required=True),),
    success_message="User group deleted successfully.",
)

ASSIGN_USERS_TO_GROUP = Endpoint(
    "assign_users_to_group",
    "Add users to a user group.",
    "POST", "/api/group/members/assign/{userGroupId}",
    params=(
        Param("userGroupId", int, required=True),
        Param("userIds", list, required=True, wire_name="userId", style="brackets"),
    ),
    success_message="Users assigned to group.",
)

UNASSIGN_USERS_FROM_GROUP = Endpoint(
    "unassign_users_from_group",
    "Remove users from a user group.",
    "POST", "/api/group/members/unassign/{userGroupId}",
    params=(
        Param("userGroupId", int, required=True),
        Param("userIds", list, required=True, wire_name="userId", style="brackets"),
    ),
    success_message="Users unassigned from group.",
)

COPY_USER_GROUP = Endpoint(
    "copy_user_group",
    "Copy a user group, optionally with its members and features.",
    "POST", "/api/group/{userGroupId}/copy",
    params=(
        Param("userGroupId", int, required=True),
        Param("group", str, required=True),
        Param("copyMembers", bool),
        Param("copyFeatures", bool),
    ),
    response=schemas.UserGroup,
)


# =============================================================================
# USERS
# =============================================================================

GET_USERS = Endpoint(
    "get_users",
    "Search users.",
    "GET", "/api/user",
    params=(
        Param("userId", int),
        Param("userName", str),
        Param("userTypeId", int),
        Param("retired", int),
    ),
    response=schemas.User, many=True,
)

GET_CURRENT_USER = Endpoint(
    "get_current_user",
    "Get the user the API credentials belong to.",
    "GET", "/api/user/me",
    response=schemas.User,
)

ADD_USER = Endpoint(
    "add_user",
    "Create a user.",
    "POST", "/api/user",
    params=(
        Param("userName", str, required=True),
        Param("userTypeId", int, required=True, description="1 super admin, 2 group admin, 3 user"),
        Param("homePageId", str, required=True),
        Param("password", str, required=True),
        Param("groupId", int, required=True),
        Param("email", str),
        Param("libraryQuota", int),
        Param("firstName", str),
        Param("lastName", str),
        Param("newUserWizard", int),
        Param("hideNavigation", int),
        Param("homeFolderId", int),
    ),
    response=schemas.User,
)

EDIT_USER = Endpoint(
    "edit_user",
    "Edit a user's profile, type, home page, quota or retired flag.",
    "PUT", "/api/user/{userId}",
    params=(
        Param("userId", int, required=True),
        Param("userName", str),
        Param("userTypeId", int),
        Param("homePageId", str),
        Param("email", str),
        Param("libraryQuota", int, description="Kilobytes"),
        Param("retired", int),
        Param("firstName", str),
        Param("lastName", str),
        Param("phone", str),
        Param("ref1", str),
        Param("ref2", str),
        Param("ref3", str),
        Param("ref4", str),
        Param("ref5", str),
        Param("newUserWizard", int),
        Param("hideNavigation", int),
        Param("isPasswordChangeRequired", int),
    ),
    response=schemas.User,
)

DELETE_USER = Endpoint(
    "delete_user",
    "Delete a user, optionally deleting or reassigning their items.",
    "DELETE", "/api/user/{userId}",
    params=(
        Param("userId", int, required=True),
        Param("deleteAllItems", bool),
        Param("reassignUserId", int),
    ),
    success_message="User deleted successfully.",
)


# =============================================================================
# NOTIFICATIONS
# =============================================================================

GET_NOTIFICATIONS = Endpoint(
    "get_notifications",
    "List notifications.",
    "GET", "/api/notification",
    params=(
        Param("notificationId", int),
        Param("subject", str),
        Param("embed", str, description="userGroups,displayGroups"),
    ),
    response=schemas.Notification, many=True,
)

ADD_NOTIFICATION = Endpoint(
    "add_notification",
    "Send a notification to user groups and/or display groups.",
    "POST", "/api/notification",
    params=(
        Param("subject", str, required=True),
        Param("body", str),
        Param("releaseDt", str, description="Y-m-d H:i:s"),
        Param("isInterrupt", int),
        Param("displayGroupIds", list, style="brackets"),
        Param("userGroupIds", list, style="brackets"),
    ),
    response=schemas.Notification,
)

EDIT_NOTIFICATION = Endpoint(
    "edit_notification",
    "Edit a notification.",
    "PUT", "/api/notification/{notificationId}",
    params=(
        Param("notificationId", int, required=True),
        Param("subject", str, required=True),
        Param("body", str),
        Param("releaseDt", str, required=True),
        Param("isInterrupt", int, required=True),
        Param("displayGroupIds", list, style="brackets"),
        Param("userGroupIds", list, style="brackets"),
    ),
    response=schemas.Notification,
)

DELETE_NOTIFICATION = Endpoint(
    "delete_notification",
    "Delete a notification.",
    "DELETE", "/api/notification/{notificationId}",
    params=(Param("notificationId", int, required=True),),
    success_message="Notification deleted successfully.",
)


# =============================================================================
# STATISTICS
# =============================================================================

GET_STATS = Endpoint(
    "get_stats",
    "Proof of play statistics for layouts, media, widgets or events.",
    "GET", "/api/stats",
    params=(
        Param("type", str, enum=("Layout", "Media", "Widget", "Event")),
        Param("fromDt", str, description="Y-m-d H:i:s"),
        Param("toDt", str, description="Y-m-d H:i:s"),
        Param("statDate", str),
        Param("statId", str),
        Param("displayId", int),
        Param("displayIds", list),
        Param("layoutId", list),
        Param("parentCampaignId", int),
        Param("mediaId", list),
        Param("campaignId", int),
        Param("returnDisplayLocalTime", bool),
        Param("returnDateFormat", str),
        Param("embed", str),
    ),
    response=schemas.Statistic, many=True,
)

GET_EXPORT_STATS_COUNT = Endpoint(
    "get_export_stats_count",
    "Count the statistics records an export for the period would contain.",
    "GET", "/api/stats/getExportStatsCount",
    params=(
        Param("fromDt", str),
        Param("toDt", str),
        Param("displayId", int),
    ),
    response=schemas.ExportStatsCount,
)

GET_TIME_DISCONNECTED = Endpoint(
    "get_time_disconnected",
    "Periods displays were disconnected from the CMS.",
    "GET", "/api/stats/timeDisconnected",
    params=(
        Param("fromDt", str),
        Param("toDt", str),
        Param("displayId", int),
        Param("displayIds", list),
        Param("returnDisplayLocalTime", bool),
        Param("returnDateFormat", str),
    ),
    response=schemas.TimeDisconnected, many=True,
)


# =============================================================================
# FOLDERS
# =============================================================================

GET_FOLDERS = Endpoint(
    "get_folders",
    "Get the folder tree. Result includes a text tree view.",
    "GET", "/api/folders",
    params=(
        Param("folderId", int),
        Param("gridView", int),
        Param("folderName", str),
        Param("exactFolderName", int),
    ),
    response=schemas.Folder, many=True,
    postprocess=_folder_tree,
)

ADD_FOLDER = Endpoint(
    "add_folder",
    "Create a folder.",
    "POST", "/api/folders",
    params=(
        Param("text", str, required=True, description="Folder name"),
        Param("parentId", int),
    ),
    response=schemas.Folder,
)

EDIT_FOLDER = Endpoint(
    "edit_folder",
    "Rename a folder.",
    "PUT", "/api/folders/{folderId}",
    params=(
        Param("folderId", int, required=True),
        Param("text", str, required=True),
    ),
    response=schemas.Folder,
)

DELETE_FOLDER = Endpoint(
    "delete_folder",
    "Delete an empty folder.",
    "DELETE", "/api/folders/{folderId}",
    params=(Param("folderId", int, required=True),),
    success_message="Folder deleted successfully.",
)


# =============================================================================
# COMMANDS
# =============================================================================

GET_COMMANDS = Endpoint(
    "get_commands",
    "List player commands.",
    "GET", "/api/command",
    params=(
        Param("commandId", int),
        Param("command", str),
        Param("code", str),
        Param("useRegexForName", int),
    ),
    response=schemas.Command, many=True,
)

_COMMAND_FIELDS = (
    Param("description", str),
    Param("commandString", str),
    Param("validationString", str),
    Param("availableOn", str, description="Comma separated player types"),
    Param("createAlertOn", str, enum=("success", "failure", "always", "never")),
)

ADD_COMMAND = Endpoint(
    "add_command",
    "Create a player command.",
    "POST", "/api/command",
    params=(
        Param("command", str, required=True),
        Param("code", str, required=True),
    ) + _COMMAND_FIELDS,
    response=schemas.Command,
)

EDIT_COMMAND = Endpoint(
    "edit_command",
    "Edit a player command.",
    "PUT", "/api/command/{commandId}",
    params=(
        Param("commandId", int, required=True),
        Param("command", str, required=True),
    ) + _COMMAND_FIELDS,
    response=schemas.Command,
)

DELETE_COMMAND = Endpoint(
    "delete_command",
    "Delete a player command.",
    "DELETE", "/api/command/{commandId}",
    params=(Param("commandId", int, required=True),),
    success_message="Command deleted successfully.",
)


# =============================================================================
# DAY PARTS
# =============================================================================

GET_DAY_PARTS = Endpoint(
    "get_day_parts",
    "List day parts (named time windows used in scheduling).",
    "GET", "/api/daypart",
    params=(
        Param("dayPartId", int),
        Param("name", str),
        Param("embed", str, description="exceptions"),
        Param("isAlways", int),
        Param("isCustom", int),
    ),
    response=schemas.DayPart, many=True,
    parse_json=("exceptions",),
)

_DAY_PART_FIELDS = (
    Param("name", str, required=True),
    Param("startTime", str, required=True, description="HH:mm"),
    Param("endTime", str, required=True, description="HH:mm"),
    Param("description", str),
    Param("exceptionDays", list, style="brackets", items=str),
    Param("exceptionStartTimes", list, style="brackets", items=str),
    Param("exceptionEndTimes", list, style="brackets", items=str),
)

ADD_DAY_PART = Endpoint(
    "add_day_part",
    "Create a day part with optional per-weekday exceptions.",
    "POST", "/api/daypart",
    params=_DAY_PART_FIELDS,
    response=schemas.DayPart,
    parse_json=("exceptions",),
)

EDIT_DAY_PART = Endpoint(
    "edit_day_part",
    "Edit a day part's name, times or exceptions.",
    "PUT", "/api/daypart/{dayPartId}",
    params=(Param("dayPartId", int, required=True),) + _DAY_PART_FIELDS,
    response=schemas.DayPart,
    parse_json=("exceptions",),
)

DELETE_DAY_PART = Endpoint(
    "delete_day_part",
    "Delete a day part.",
    "DELETE", "/api/daypart/{dayPartId}",
    params=(Param("dayPartId", int, required=True),),
    success_message="Day part deleted successfully.",
)


# =============================================================================
# RESOLUTIONS
# =============================================================================

GET_RESOLUTIONS = Endpoint(
    "get_resolutions",
    "List screen resolutions.",
    "GET", "/api/resolution",
    params=(
        Param("resolutionId", int),
        Param("resolution", str),
        Param("partialResolution", str),
        Param("enabled", int),
        Param("width", int),
        Param("height", int),
    ),
    response=schemas.Resolution, many=True,
)

_RESOLUTION_FIELDS = (
    Param("resolution", str, required=True),
    Param("width", int, required=True),
    Param("height", int, required=True),
)

ADD_RESOLUTION = Endpoint(
    "add_resolution",
    "Create a screen resolution.",
    "POST", "/api/resolution",
    params=_RESOLUTION_FIELDS,
    response=schemas.Resolution,
)

EDIT_RESOLUTION = Endpoint(
    "edit_resolution",
    "Rename or resize a screen resolution.",
    "PUT", "/api/resolution/{resolutionId}",
    params=(Param("resolutionId", int, required=True),) + _RESOLUTION_FIELDS,
    response=schemas.Resolution,
)

DELETE_RESOLUTION = Endpoint(
    "delete_resolution",
    "Delete a screen resolution.",
    "DELETE", "/api/resolution/{resolutionId}",
    params=(Param("resolutionId", int, required=True),),
    success_message="Resolution deleted successfully.",
)


# =============================================================================
# DATA SETS
# =============================================================================

GET_DATA_SETS = Endpoint(
    "get_data_sets",
    "Search data sets (tables that feed data widgets).",
    "GET", "/api/dataset",
    params=(
        Param("dataSetId", int),
        Param("dataSet", str, description="Filter by name"),
        Param("code", str),
        Param("isRealTime", int),
        Param("folderId", int),
    ),
    response=schemas.DataSet, many=True,
)

ADD_DATA_SET = Endpoint(
    "add_data_set",
    "Create a data set.",
    "POST", "/api/dataset",
    params=(
        Param("dataSet", str, required=True, description="Name"),
        Param("description", str),
        Param("code", str),
        Param("isRemote", int),
        Param("folderId", int),
    ),
    response=schemas.DataSet,
)

EDIT_DATA_SET = Endpoint(
    "edit_data_set",
    "Edit a data set's name, description or code.",
    "PUT", "/api/dataset/{dataSetId}",
    params=(
        Param("dataSetId", int, required=True),
        Param("dataSet", str, required=True, description="Name"),
        Param("description", str),
        Param("code", str),
        Param("isRemote", int),
        Param("folderId", int),
    ),
    response=schemas.DataSet,
)

DELETE_DATA_SET = Endpoint(
    "delete_data_set",
    "Delete a data set and all of its rows.",
    "DELETE", "/api/dataset/{dataSetId}",
    params=(Param("dataSetId", int, required=True),),
    success_message="Data set deleted successfully.",
)

ADD_DATA_SET_COLUMN = Endpoint(
    "add_data_set_column",
    "Add a column to a data set.",
    "POST", "/api/dataset/{dataSetId}/column",
    params=(
        Param("dataSetId", int, required=True),
        Param("heading", str, required=True),
        Param("dataTypeId", int, required=True,
              description="1 string, 2 number, 3 date, 4 external image, 5 library image, 6 HTML"),
        Param("columnOrder", int, required=True),
        Param("dataSetColumnTypeId", int, description="1 value, 2 formula, 3 remote"),
        Param("listContent", str),
        Param("formula", str),
        Param("showFilter", int),
        Param("showSort", int),
        Param("tooltip", str),
        Param("isRequired", int),
    ),
    response=schemas.DataSetColumn,
)

GET_DATA_SET_DATA = Endpoint(
    "get_data_set_data",
    "Read the rows of a data set.",
    "GET", "/api/dataset/data/{dataSetId}",
    params=(Param("dataSetId", int, required=True),),
    response=schemas.DataSetRow, many=True,
)

ADD_DATA_SET_ROW = Endpoint(
    "add_data_set_row",
    "Add a row to a data set.",
    "POST", "/api/dataset/data/{dataSetId}",
    params=(
        Param("dataSetId", int, required=True),
        Param("values", dict, required=True, style="fields",
              description='Column values keyed "dataSetColumnId_<columnId>"'),
    ),
    response=schemas.DataSetRow,
    success_message="Data set row added successfully.",
)

EDIT_DATA_SET_ROW = Endpoint(
    "edit_data_set_row",
    "Change values in a data set row.",
    "PUT", "/api/dataset/data/{dataSetId}/{rowId}",
    params=(
        Param("dataSetId", int, required=True),
        Param("rowId", int, required=True),
        Param("values", dict, required=True, style="fields",
              description='Column values keyed "dataSetColumnId_<columnId>"'),
    ),
    response=schemas.DataSetRow,
    success_message="Data set row updated successfully.",
)

DELETE_DATA_SET_ROW = Endpoint(
    "delete_data_set_row",
    "Delete a row from a data set.",
    "DELETE", "/api/dataset/data/{dataSetId}/{rowId}",
    params=(
        Param("dataSetId", int, required=True),
        Param("rowId", int, required=True),
    ),
    success_message="Data set row deleted successfully.",
)


# =============================================================================
# LIBRARY
# =============================================================================

GET_LIBRARY = Endpoint(
    "get_library",
    "Search the media library.",
    "GET", "/api/library",
    params=(
        Param("mediaId", int),
        Param("media", str, description="Filter by media name"),
        Param("type", str),
        Param("ownerId", int),
        Param("retired", int),
        Param("tags", str),
        Param("exactTags", int),
        Param("duration", str),
        Param("fileSize", str),
        Param("folderId", int),
    ),
    response=schemas.Media, many=True,
)

UPLOAD_MEDIA = Endpoint(
    "upload_media",
    "Upload a local file to the media library. Relative paths are resolved against the upload directory.",
    "POST", "/api/library",
    params=(
        Param("filePath", str, required=True, location=FILE, wire_name="files"),
        Param("name", str),
        Param("oldMediaId", int),
        Param("updateInLayouts", int),
        Param("deleteOldRevisions", int),
        Param("tags", str),
        Param("folderId", int),
    ),
    body="multipart",
    response=schemas.UploadResult,
)

DELETE_MEDIA = Endpoint(
    "delete_media",
    "Delete a media item from the library.",
    "DELETE", "/api/library/{mediaId}",
    params=(
        Param("mediaId", int, required=True),
        Param("forceDelete", bool),
        Param("purge", bool),
    ),
    success_message="Media deleted successfully.",
)


# =============================================================================
# MISC
# =============================================================================

GET_ABOUT = Endpoint(
    "get_about",
    "Get the CMS version and source information.",
    "GET", "/api/about",
    response=schemas.About,
)

GET_CMS_TIME = Endpoint(
    "get_cms_time",
    "Get the current time on the CMS server.",
    "GET", "/api/clock",
    response=schemas.Clock,
)


# =============================================================================
# ALL TOOLS LIST
# =============================================================================

ENDPOINTS: list[Endpoint] = [
    # Actions
    GET_ACTIONS,
    ADD_ACTION,
    DELETE_ACTION,
    # Displays
    GET_DISPLAYS,
    EDIT_DISPLAY,
    DELETE_DISPLAY,
    REQUEST_DISPLAY_SCREENSHOT,
    WAKE_DISPLAY_ON_LAN,
    AUTHORISE_DISPLAY,
    SET_DEFAULT_LAYOUT_FOR_DISPLAY,
    # Display groups
    GET_DISPLAY_GROUPS,
    ADD_DISPLAY_GROUP,
    EDIT_DISPLAY_GROUP,
    DELETE_DISPLAY_GROUP,
    ASSIGN_DISPLAYS_TO_DISPLAY_GROUP,
    UNASSIGN_DISPLAYS_FROM_DISPLAY_GROUP,
    COPY_DISPLAY_GROUP,
    COLLECT_NOW_FOR_DISPLAY_GROUP,
    # Display profiles
    GET_DISPLAY_PROFILES,
    EDIT_DISPLAY_PROFILE,
    DELETE_DISPLAY_PROFILE,
    # Sync groups
    GET_SYNC_GROUPS,
    ADD_SYNC_GROUP,
    EDIT_SYNC_GROUP,
    GET_SYNC_GROUP_DISPLAYS,
    # Layouts
    GET_LAYOUTS,
    ADD_LAYOUT,
    EDIT_LAYOUT,
    DELETE_LAYOUT,
    PUBLISH_LAYOUT,
    CHECKOUT_LAYOUT,
    DISCARD_LAYOUT,
    RETIRE_LAYOUT,
    UNRETIRE_LAYOUT,
    COPY_LAYOUT,
    # Regions
    ADD_REGION,
    EDIT_REGION,
    DELETE_REGION,
    # Playlists
    GET_PLAYLISTS,
    ADD_PLAYLIST,
    EDIT_PLAYLIST,
    DELETE_PLAYLIST,
    COPY_PLAYLIST,
    ASSIGN_LIBRARY_ITEMS,
    # Widgets
    ADD_WIDGET,
    EDIT_WIDGET,
    DELETE_WIDGET,
    # Campaigns
    GET_CAMPAIGNS,
    ADD_CAMPAIGN,
    EDIT_CAMPAIGN,
    DELETE_CAMPAIGN,
    ASSIGN_LAYOUT_TO_CAMPAIGN,
    REMOVE_LAYOUT_FROM_CAMPAIGN,
    # Schedules
    GET_SCHEDULE_EVENTS,
    ADD_SCHEDULE,
    EDIT_SCHEDULE,
    DELETE_SCHEDULE,
    DELETE_SCHEDULE_RECURRENCE,
    # Tags
    GET_TAGS,
    ADD_TAG,
    EDIT_TAG,
    DELETE_TAG,
    # Templates
    GET_TEMPLATES,
    ADD_TEMPLATE_FROM_LAYOUT,
    # User groups
    GET_USER_GROUPS,
    ADD_USER_GROUP,
    EDIT_USER_GROUP,
    DELETE_USER_GROUP,
    ASSIGN_USERS_TO_GROUP,
    UNASSIGN_USERS_FROM_GROUP,
    COPY_USER_GROUP,
    # Users
    GET_USERS,
    GET_CURRENT_USER,
    ADD_USER,
    EDIT_USER,
    DELETE_USER,
    # Notifications
    GET_NOTIFICATIONS,
    ADD_NOTIFICATION,
    EDIT_NOTIFICATION,
    DELETE_NOTIFICATION,
    # Statistics
    GET_STATS,
    GET_EXPORT_STATS_COUNT,
    GET_TIME_DISCONNECTED,
    # Folders
    GET_FOLDERS,
    ADD_FOLDER,
    EDIT_FOLDER,
    DELETE_FOLDER,
    # Commands
    GET_COMMANDS,
    ADD_COMMAND,
    EDIT_COMMAND,
    DELETE_COMMAND,
    # Day parts
    GET_DAY_PARTS,
    ADD_DAY_PART,
    EDIT_DAY_PART,
    DELETE_DAY_PART,
    # Resolutions
    GET_RESOLUTIONS,
    ADD_RESOLUTION,
    EDIT_RESOLUTION,
    DELETE_RESOLUTION,
    # Data sets
    GET_DATA_SETS,
    ADD_DATA_SET,
    EDIT_DATA_SET,
    DELETE_DATA_SET,
    ADD_DATA_SET_COLUMN,
    GET_DATA_SET_DATA,
    ADD_DATA_SET_ROW,
    EDIT_DATA_SET_ROW,
    DELETE_DATA_SET_ROW,
    # Library
    GET_LIBRARY,
    UPLOAD_MEDIA,
    DELETE_MEDIA,
    # Misc
    GET_ABOUT,
    GET_CMS_TIME,
]

ALL_TOOLS = [_make_tool(endpoint) for endpoint in ENDPOINTS]

TOOLS_BY_NAME = {t.name: t for t in ALL_TOOLS}
