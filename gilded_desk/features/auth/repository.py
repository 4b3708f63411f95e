"""User directory repository"""
import logging
from typing import Optional

from gilded_desk.features.auth.domain import User, UserCreate, UserUpdate
from gilded_desk.infra.repository import BaseRepository
from gilded_desk.infra.store import FlatRecordStore
from gilded_desk.utils.datetime_helper import now_iso

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository(BaseRepository[User]):
    """Users keyed by lowercase email. Users are never deleted."""

    def __init__(self, store: FlatRecordStore):
        super().__init__(store, "users", User)

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive)"""
        if not email:
            return None

        key = normalize_email(email)
        for record in self.load_records():
            if normalize_email(record.get("email") or "") == key:
                return self._to_model(record)
        return None

    def find_by_customer_id(self, customer_id: str) -> Optional[User]:
        """Find a user by Stripe customer ID"""
        if not customer_id:
            return None

        results = self.find_by_filters({"stripeCustomerId": customer_id})
        return results[0] if results else None

    def create(self, data: UserCreate) -> User:
        """
        Create a user with no subscription.

        Presence of email/name is checked by the caller; this only
        normalises the email and fills in defaults.
        """
        user = User(
            email=normalize_email(data.email),
            name=data.name,
            stripe_customer_id=data.stripe_customer_id,
            subscription_id=None,
            active_subscription=False,
            created_at=now_iso(),
        )
        self.append(user)
        logger.info(f"Created user {user.email}")
        return user

    def update(self, email: str, data: UserUpdate) -> Optional[User]:
        """
        Shallow-merge the explicitly set fields into a stored user.

        Returns:
            The updated user, or None if no user has this email
        """
        key = normalize_email(email)
        records = self.load_records()

        for index, existing in enumerate(records):
            if normalize_email(existing.get("email") or "") == key:
                updated = {**existing, **data.model_dump(exclude_unset=True, by_alias=True)}
                records[index] = updated
                self.save_records(records)
                return self._to_model(updated)

        logger.warning(f"Cannot update unknown user {key}")
        return None
