"""
Xibo CMS entity schemas

Shapes of the JSON objects returned by the CMS, used to validate responses.
Fields the tools rely on are declared and type-checked; anything else the
CMS sends is kept as-is (extra="allow").
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict


class CmsModel(BaseModel):
    """Base for all CMS entities."""

    model_config = ConfigDict(extra="allow")


class Tag(CmsModel):
    tagId: int
    tag: str
    isSystem: Optional[int] = None
    isRequired: Optional[int] = None
    options: Optional[Union[list[Any], str]] = None


class TagLink(CmsModel):
    """A tag attached to another entity, with its optional value."""

    tagId: int
    tag: Optional[str] = None
    value: Optional[str] = None


class Action(CmsModel):
    actionId: int
    ownerId: int
    triggerType: Optional[str] = None
    triggerCode: Optional[str] = None
    actionType: Optional[str] = None
    source: Optional[str] = None
    sourceId: Optional[int] = None
    target: Optional[str] = None
    targetId: Optional[int] = None
    widgetId: Optional[int] = None
    layoutCode: Optional[str] = None


class DisplayGroup(CmsModel):
    displayGroupId: int
    displayGroup: str
    description: Optional[str] = None
    isDisplaySpecific: Optional[int] = None
    isDynamic: Optional[int] = None
    dynamicCriteria: Optional[str] = None
    dynamicCriteriaTags: Optional[str] = None
    userId: Optional[int] = None
    tags: Optional[list[TagLink]] = None
    bandwidthLimit: Optional[int] = None
    folderId: Optional[int] = None
    createdDt: Optional[str] = None
    modifiedDt: Optional[str] = None


class Display(CmsModel):
    displayId: int
    display: str
    description: Optional[str] = None
    displayGroupId: Optional[int] = None
    defaultLayoutId: Optional[int] = None
    defaultLayout: Optional[str] = None
    currentLayoutId: Optional[int] = None
    license: Optional[str] = None
    licensed: Optional[int] = None
    loggedIn: Optional[int] = None
    lastAccessed: Optional[Union[int, str]] = None
    mediaInventoryStatus: Optional[int] = None
    macAddress: Optional[str] = None
    clientAddress: Optional[str] = None
    clientType: Optional[str] = None
    clientVersion: Optional[str] = None
    clientCode: Optional[int] = None
    displayProfileId: Optional[int] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timeZone: Optional[str] = None
    tags: Optional[list[TagLink]] = None
    displayGroups: Optional[list[DisplayGroup]] = None
    folderId: Optional[int] = None


class Region(CmsModel):
    regionId: int
    layoutId: Optional[int] = None
    name: Optional[str] = None
    width: Optional[float] = None
    height: Optional[float] = None
    top: Optional[float] = None
    left: Optional[float] = None
    zIndex: Optional[int] = None
    duration: Optional[int] = None


class Layout(CmsModel):
    layoutId: int
    layout: str
    campaignId: Optional[int] = None
    parentId: Optional[int] = None
    publishedStatusId: Optional[int] = None
    publishedStatus: Optional[str] = None
    ownerId: Optional[int] = None
    description: Optional[str] = None
    width: Optional[float] = None
    height: Optional[float] = None
    orientation: Optional[str] = None
    backgroundColor: Optional[str] = None
    duration: Optional[int] = None
    status: Optional[int] = None
    retired: Optional[int] = None
    code: Optional[str] = None
    folderId: Optional[int] = None
    createdDt: Optional[str] = None
    modifiedDt: Optional[str] = None
    tags: Optional[list[TagLink]] = None
    regions: Optional[list[Region]] = None


class Widget(CmsModel):
    widgetId: int
    playlistId: Optional[int] = None
    ownerId: Optional[int] = None
    type: Optional[str] = None
    duration: Optional[int] = None
    displayOrder: Optional[int] = None
    useDuration: Optional[int] = None
    calculatedDuration: Optional[int] = None
    fromDt: Optional[int] = None
    toDt: Optional[int] = None
    mediaIds: Optional[list[int]] = None
    widgetOptions: Optional[list[Any]] = None


class Playlist(CmsModel):
    playlistId: int
    name: str
    ownerId: Optional[int] = None
    regionId: Optional[int] = None
    isDynamic: Optional[int] = None
    filterMediaName: Optional[str] = None
    filterMediaTags: Optional[str] = None
    filterExactTags: Optional[int] = None
    filterFolderId: Optional[int] = None
    maxNumberOfItems: Optional[int] = None
    duration: Optional[int] = None
    requiresDurationUpdate: Optional[int] = None
    enableStat: Optional[str] = None
    createdDt: Optional[str] = None
    modifiedDt: Optional[str] = None
    folderId: Optional[int] = None
    tags: Optional[list[TagLink]] = None
    widgets: Optional[list[Widget]] = None


class Campaign(CmsModel):
    campaignId: int
    campaign: str
    ownerId: Optional[int] = None
    type: Optional[str] = None
    isLayoutSpecific: Optional[int] = None
    numberLayouts: Optional[int] = None
    totalDuration: Optional[int] = None
    tags: Optional[list[TagLink]] = None
    folderId: Optional[int] = None
    cyclePlaybackEnabled: Optional[int] = None
    playCount: Optional[int] = None
    listPlayOrder: Optional[str] = None
    targetType: Optional[str] = None
    target: Optional[int] = None
    startDt: Optional[int] = None
    endDt: Optional[int] = None
    layouts: Optional[list[Any]] = None


class ScheduleEvent(CmsModel):
    eventId: int
    eventTypeId: int
    campaignId: Optional[int] = None
    commandId: Optional[int] = None
    displayGroups: Optional[list[DisplayGroup]] = None
    userId: Optional[int] = None
    fromDt: Optional[Union[int, str]] = None
    toDt: Optional[Union[int, str]] = None
    isPriority: Optional[int] = None
    displayOrder: Optional[int] = None
    recurrenceType: Optional[str] = None
    recurrenceDetail: Optional[int] = None
    recurrenceRange: Optional[int] = None
    dayPartId: Optional[int] = None
    campaign: Optional[str] = None
    name: Optional[str] = None
    syncGroupId: Optional[int] = None
    dataSetParams: Optional[Any] = None


class Template(CmsModel):
    layoutId: int
    layout: str
    description: Optional[str] = None
    width: Optional[float] = None
    height: Optional[float] = None
    orientation: Optional[str] = None
    tags: Optional[list[TagLink]] = None
    folderId: Optional[int] = None


class UserGroup(CmsModel):
    groupId: int
    group: str
    isUserSpecific: Optional[int] = None
    isEveryone: Optional[int] = None
    description: Optional[str] = None
    libraryQuota: Optional[int] = None
    isSystemNotification: Optional[int] = None
    isDisplayNotification: Optional[int] = None
    isScheduleNotification: Optional[int] = None
    isCustomNotification: Optional[int] = None
    isShownForAddUser: Optional[int] = None
    defaultHomepageId: Optional[str] = None
    features: Optional[list[str]] = None


class User(CmsModel):
    userId: int
    userName: str
    userTypeId: Optional[int] = None
    email: Optional[str] = None
    homePageId: Optional[Union[int, str]] = None
    homeFolderId: Optional[int] = None
    lastAccessed: Optional[str] = None
    retired: Optional[int] = None
    groupId: Optional[int] = None
    group: Optional[str] = None
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    groups: Optional[list[UserGroup]] = None


class Notification(CmsModel):
    notificationId: int
    subject: str
    body: Optional[str] = None
    createDt: Optional[Union[int, str]] = None
    releaseDt: Optional[Union[int, str]] = None
    isInterrupt: Optional[int] = None
    isSystem: Optional[int] = None
    userId: Optional[int] = None
    filename: Optional[str] = None
    originalFileName: Optional[str] = None
    nonusers: Optional[str] = None
    userGroups: Optional[list[UserGroup]] = None
    displayGroups: Optional[list[DisplayGroup]] = None


class Statistic(CmsModel):
    id: Optional[Union[int, str]] = None
    type: str
    displayId: int
    display: Optional[str] = None
    layoutId: Optional[int] = None
    layout: Optional[str] = None
    mediaId: Optional[int] = None
    media: Optional[str] = None
    widgetId: Optional[int] = None
    campaignId: Optional[int] = None
    campaign: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    statDate: Optional[str] = None
    duration: Optional[int] = None
    count: Optional[int] = None
    tag: Optional[str] = None


class ExportStatsCount(CmsModel):
    total: int


class TimeDisconnected(CmsModel):
    displayId: int
    display: Optional[str] = None
    duration: Optional[float] = None
    start: Optional[str] = None
    end: Optional[str] = None


class Folder(CmsModel):
    id: int
    text: str
    type: Optional[str] = None
    parentId: Optional[Union[int, str]] = None
    isRoot: Optional[int] = None
    children: Optional[Union[list["Folder"], str]] = None
    permissionsFolderId: Optional[int] = None


class Command(CmsModel):
    commandId: int
    command: str
    code: str
    description: Optional[str] = None
    userId: Optional[int] = None
    commandString: Optional[str] = None
    validationString: Optional[str] = None
    availableOn: Optional[str] = None
    createAlertOn: Optional[str] = None


class DayPart(CmsModel):
    dayPartId: int
    name: str
    description: Optional[str] = None
    isAlways: Optional[int] = None
    isCustom: Optional[int] = None
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    exceptions: Optional[list[dict[str, Any]]] = None


class Resolution(CmsModel):
    resolutionId: int
    resolution: str
    width: int
    height: int
    designerWidth: Optional[int] = None
    designerHeight: Optional[int] = None
    version: Optional[int] = None
    enabled: Optional[int] = None
    userId: Optional[int] = None



class DisplayProfile(CmsModel):
    displayProfileId: int
    name: str
    type: str
    isDefault: Optional[int] = None
    userId: Optional[int] = None
    config: Optional[list[Any]] = None
    commands: Optional[list[Any]] = None


class SyncGroup(CmsModel):
    syncGroupId: int
    name: Optional[str] = None
    syncGroupName: Optional[str] = None
    ownerId: Optional[int] = None
    syncPublisherPort: Optional[int] = None
    syncSwitchDelay: Optional[int] = None
    syncVideoPauseDelay: Optional[int] = None
    leadDisplayId: Optional[int] = None
    folderId: Optional[int] = None
    createdDt: Optional[str] = None
    modifiedDt: Optional[str] = None


class DataSet(CmsModel):
    dataSetId: int
    dataSet: str
    description: Optional[str] = None
    code: Optional[str] = None
    userId: Optional[int] = None
    isRemote: Optional[int] = None
    isLookup: Optional[int] = None
    lastDataEdit: Optional[int] = None
    folderId: Optional[int] = None


class DataSetColumn(CmsModel):
    dataSetColumnId: int
    dataSetId: int
    heading: str
    dataTypeId: int
    dataSetColumnTypeId: Optional[int] = None
    listContent: Optional[str] = None
    columnOrder: Optional[int] = None
    formula: Optional[str] = None
    showFilter: Optional[int] = None
    showSort: Optional[int] = None
    tooltip: Optional[str] = None
    isRequired: Optional[int] = None


class DataSetRow(CmsModel):
    """A data set row; column values arrive as extra keys named by heading."""

    id: int


class Media(CmsModel):
    mediaId: int
    name: str
    mediaType: Optional[str] = None
    storedAs: Optional[str] = None
    fileName: Optional[str] = None
    fileSize: Optional[int] = None
    duration: Optional[int] = None
    ownerId: Optional[int] = None
    retired: Optional[int] = None
    md5: Optional[str] = None
    folderId: Optional[int] = None
    tags: Optional[list[TagLink]] = None


class UploadedFile(CmsModel):
    """One entry of the library upload response's "files" list."""

    name: str
    mediaId: Optional[int] = None
    size: Optional[int] = None
    type: Optional[str] = None
    error: Optional[str] = None


class UploadResult(CmsModel):
    files: list[UploadedFile]


class About(CmsModel):
    version: str
    sourceUrl: Optional[str] = None


class Clock(CmsModel):
    time: str


Folder.model_rebuild()
