"""Public newsletter sign-up."""

import logging

from sqlalchemy.orm import Session

from poetsite.core.database import commit_or_conflict
from poetsite.core.errors import Conflict, ValidationFailed
from poetsite.models import Subscriber

logger = logging.getLogger(__name__)

ALREADY_SUBSCRIBED_MESSAGE = "আপনি ইতিমধ্যে সাবস্ক্রাইব করেছেন!"
RESUBSCRIBED_MESSAGE = "স্বাগতম! আপনি আবার সাবস্ক্রাইব করেছেন।"
SUBSCRIBED_MESSAGE = "সাবস্ক্রিপশন সফল হয়েছে! ধন্যবাদ।"


def subscribe(db: Session, email: str | None) -> str:
    """
    Add an address to the mailing list and return the message to show.

    An inactive subscriber is switched back on; an active one is a 409.
    """
    email = (email or "").strip()
    if "@" not in email:
        raise ValidationFailed("অনুগ্রহ করে একটি সঠিক ইমেইল প্রদান করুন")

    subscriber = db.query(Subscriber).filter(Subscriber.email == email).first()
    if subscriber is not None:
        if subscriber.is_active:
            raise Conflict(ALREADY_SUBSCRIBED_MESSAGE)
        subscriber.is_active = True
        db.commit()
        logger.info("Subscriber %s reactivated", subscriber.id)
        return RESUBSCRIBED_MESSAGE

    subscriber = Subscriber(email=email, is_active=True)
    db.add(subscriber)
    commit_or_conflict(db, ALREADY_SUBSCRIBED_MESSAGE)
    logger.info("Subscriber %s added", subscriber.id)
    return SUBSCRIBED_MESSAGE
