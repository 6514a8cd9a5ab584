"""Users and the five marketing resource tables.

Revision ID: 20251020000000
Revises:
Create Date: 2025-10-20

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20251020000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_name", sa.String(length=255), nullable=False),
        sa.Column("email_id", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email_id"), "users", ["email_id"], unique=True)

    op.create_table(
        "vehicle_marketing",
        sa.Column("v_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("v_type", sa.String(length=100), nullable=True),
        sa.Column("v_number", sa.String(length=50), nullable=True),
        sa.Column("v_area", sa.String(length=255), nullable=True),
        sa.Column("v_city", sa.String(length=100), nullable=True),
        sa.Column("v_start_date", sa.Date(), nullable=True),
        sa.Column("v_end_date", sa.Date(), nullable=True),
        sa.Column("v_duration_days", sa.Integer(), nullable=True),
        sa.Column("expected_crowd", sa.Integer(), nullable=True),
        sa.Column("v_contact_person_name", sa.String(length=255), nullable=True),
        sa.Column("v_contact_num", sa.String(length=20), nullable=True),
        sa.Column("v_cost", sa.Float(), nullable=True),
        sa.Column("payment_status", sa.String(length=50), nullable=True),
        sa.Column("remarks", sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("v_id"),
    )

    op.create_table(
        "society_marketing",
        sa.Column("s_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("s_name", sa.String(length=255), nullable=True),
        sa.Column("s_area", sa.String(length=255), nullable=True),
        sa.Column("s_city", sa.String(length=100), nullable=True),
        sa.Column("s_pincode", sa.String(length=20), nullable=True),
        sa.Column("s_contact_person_name", sa.String(length=255), nullable=True),
        sa.Column("s_contact_num", sa.String(length=20), nullable=True),
        sa.Column("s_no_flats", sa.Integer(), nullable=True),
        sa.Column("s_type", sa.String(length=100), nullable=True),
        sa.Column("s_event_type", sa.String(length=255), nullable=True),
        sa.Column("event_date", sa.Date(), nullable=True),
        sa.Column("event_time", sa.Time(), nullable=True),
        sa.Column("s_address", sa.Text(), nullable=True),
        sa.Column("s_lat", sa.Float(), nullable=True),
        sa.Column("s_long", sa.Float(), nullable=True),
        sa.Column("s_crowd", sa.Integer(), nullable=True),
        sa.Column("approval_status", sa.String(length=50), nullable=True),
        sa.Column("event_status", sa.String(length=50), nullable=True),
        sa.Column("expected_cost", sa.Float(), nullable=True),
        sa.Column("actual_cost", sa.Float(), nullable=True),
        sa.Column("responsible_person", sa.String(length=255), nullable=True),
        sa.Column("follow_up_date", sa.Date(), nullable=True),
        sa.Column("remarks", sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("s_id"),
    )

    op.create_table(
        "balloon_marketing",
        sa.Column("b_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("b_location_name", sa.String(length=255), nullable=True),
        sa.Column("b_area", sa.String(length=255), nullable=True),
        sa.Column("b_city", sa.String(length=100), nullable=True),
        sa.Column("b_address", sa.Text(), nullable=True),
        sa.Column("b_lat", sa.Float(), nullable=True),
        sa.Column("b_long", sa.Float(), nullable=True),
        sa.Column("b_size", sa.String(length=50), nullable=True),
        sa.Column("b_type", sa.String(length=50), nullable=True),
        sa.Column("b_height", sa.Integer(), nullable=True),
        sa.Column("b_duration_days", sa.Integer(), nullable=True),
        sa.Column("b_start_date", sa.Date(), nullable=True),
        sa.Column("b_end_date", sa.Date(), nullable=True),
        sa.Column("expected_crowd", sa.Integer(), nullable=True),
        sa.Column("b_contact_person_name", sa.String(length=255), nullable=True),
        sa.Column("b_contact_num", sa.String(length=20), nullable=True),
        sa.Column("b_cost", sa.Float(), nullable=True),
        sa.Column("payment_status", sa.String(length=50), nullable=True),
        sa.Column("remarks", sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("b_id"),
    )

    op.create_table(
        "outdoormarketingscreens",
        sa.Column("ScreenID", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("ScreenName", sa.String(length=255), nullable=True),
        sa.Column("Location", sa.String(length=255), nullable=True),
        sa.Column("City", sa.String(length=100), nullable=True),
        sa.Column("State", sa.String(length=100), nullable=True),
        sa.Column("Latitude", sa.Float(), nullable=True),
        sa.Column("Longitude", sa.Float(), nullable=True),
        sa.Column("ScreenType", sa.String(length=50), nullable=True),
        sa.Column("Size", sa.String(length=50), nullable=True),
        sa.Column("Resolution", sa.String(length=50), nullable=True),
        sa.Column("OwnerName", sa.String(length=255), nullable=True),
        sa.Column("ContactPerson", sa.String(length=255), nullable=True),
        sa.Column("ContactNumber", sa.String(length=20), nullable=True),
        sa.Column("OnboardingDate", sa.Date(), nullable=True),
        sa.Column("Status", sa.String(length=50), nullable=True),
        sa.Column("RentalCost", sa.Float(), nullable=True),
        sa.Column("ContractStartDate", sa.Date(), nullable=True),
        sa.Column("ContractEndDate", sa.Date(), nullable=True),
        sa.Column("PowerBackup", sa.Boolean(), nullable=True),
        sa.Column("InternetConnectivity", sa.String(length=50), nullable=True),
        sa.Column("Notes", sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("ScreenID"),
    )

    op.create_table(
        "hoardings",
        sa.Column("h_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("h_name", sa.String(length=255), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("state", sa.String(length=100), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("size", sa.String(length=50), nullable=True),
        sa.Column("owner_name", sa.String(length=255), nullable=True),
        sa.Column("contact_person", sa.String(length=255), nullable=True),
        sa.Column("contact_number", sa.String(length=20), nullable=True),
        sa.Column("ad_start_date", sa.Date(), nullable=True),
        sa.Column("ad_end_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(length=50), nullable=True),
        sa.Column("rental_cost", sa.Float(), nullable=True),
        sa.Column("contract_start_date", sa.Date(), nullable=True),
        sa.Column("contract_end_date", sa.Date(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("h_id"),
    )


def downgrade() -> None:
    op.drop_table("hoardings")
    op.drop_table("outdoormarketingscreens")
    op.drop_table("balloon_marketing")
    op.drop_table("society_marketing")
    op.drop_table("vehicle_marketing")
    op.drop_index(op.f("ix_users_email_id"), table_name="users")
    op.drop_table("users")
