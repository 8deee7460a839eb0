"""
Unit tests for Xibo CMS API tools.

Tests organized by tool category:
- catalog (behaviour shared by every tool)
- tags
- displays (display groups, display profiles, sync groups)
- layouts (templates, campaigns)
- playlists (widgets, regions)
- schedules (day parts, commands)
- data sets
- library
- misc (folders, users, notifications, statistics, about/clock)
"""
