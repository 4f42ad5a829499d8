"""
Events Module.

Creates Discord scheduled events with an announcement, RSVP reactions
and a discussion thread, and exports a server's scheduled events as an
iCalendar file.
"""
