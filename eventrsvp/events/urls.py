EVENTS_URL = "/api/v1/events"
PUBLIC_EVENTS_URL = "/api/v1/events/public"
EVENT_URL = "/api/v1/events/{event_id}"
SUBMIT_RSVP_URL = "/api/v1/events/{event_id}/rsvp"
EVENT_RSVPS_URL = "/api/v1/events/{event_id}/rsvps"
EXPORT_ATTENDEES_URL = "/api/v1/events/{event_id}/export"
EVENT_STATS_URL = "/api/v1/events/{event_id}/stats"
ATTENDEES_URL = "/api/v1/attendees"
RSVP_URL = "/api/v1/rsvps/{rsvp_id}"
