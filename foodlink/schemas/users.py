from pydantic import BaseModel, Field

class UserInfo(BaseModel):
	username: str
	email: str
	donations_made: int = Field(serialization_alias="donationsMade")
	claimed_donations: int = Field(serialization_alias="claimedDonations")

	class Config:
		from_attributes = True
