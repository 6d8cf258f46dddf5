from fastapi import APIRouter

from .features.create_event.router import router as create_event_router
from .features.delete_event.router import router as delete_event_router
from .features.delete_rsvp.router import router as delete_rsvp_router
from .features.event_stats.router import router as event_stats_router
from .features.export_attendees.router import router as export_attendees_router
from .features.get_event.router import router as get_event_router
from .features.list_rsvps.router import router as list_rsvps_router
from .features.submit_rsvp.router import router as submit_rsvp_router
from .features.update_event.router import router as update_event_router

router = APIRouter()

# get_event registers /events/public ahead of /events/{event_id}
router.include_router(get_event_router)
router.include_router(create_event_router)
router.include_router(update_event_router)
router.include_router(delete_event_router)
router.include_router(submit_rsvp_router)
router.include_router(list_rsvps_router)
router.include_router(delete_rsvp_router)
router.include_router(export_attendees_router)
router.include_router(event_stats_router)
