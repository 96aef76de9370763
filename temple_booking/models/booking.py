from datetime import date, datetime, time, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

class BookingCreate(BaseModel):
    """A submission that already passed validation."""
    name: str
    email: str
    date: date
    time: str
    temple: str

    def to_document(self) -> Dict[str, Any]:
        # BSON has no plain date type, so the calendar date is kept as UTC midnight
        return {
            "name": self.name,
            "email": self.email,
            "date": datetime.combine(self.date, time.min, tzinfo=timezone.utc),
            "time": self.time,
            "temple": self.temple,
        }

class Booking(BookingCreate):
    id: str
    created_at: Optional[datetime] = Field(default=None)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Booking":
        stored_date = document["date"]
        if isinstance(stored_date, datetime):
            stored_date = stored_date.date()
        return cls(
            id=str(document["_id"]),
            name=document["name"],
            email=document["email"],
            date=stored_date,
            time=document["time"],
            temple=document["temple"],
            created_at=document.get("created_at"),
        )
