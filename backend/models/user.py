from pydantic import BaseModel


class PublicUser(BaseModel):
    id: str
    name: str
    email: str


class UserRecord(BaseModel):
    id: str
    name: str
    email: str          # login key, exact match
    password: str       # plaintext, demo only

    def public(self) -> PublicUser:
        """Client-safe view of the record (drops the password)."""
        return PublicUser(id=self.id, name=self.name, email=self.email)
