"""Create candidacy and election result tables.

Revision ID: 001
Revises:
Create Date: 2026-10-17

users, elections and their admin/voter relations are owned by other parts
of the system; they are created here only so the schema is self-contained.
"""

from alembic import op


revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Apply migration: create candidacy and result tables."""
    op.execute("""
        CREATE TABLE IF NOT EXISTS users (
            id SERIAL PRIMARY KEY,
            fullname VARCHAR(255) NOT NULL,
            email VARCHAR(255) NOT NULL UNIQUE,
            profile_photo VARCHAR(1024),
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );

        CREATE TABLE IF NOT EXISTS elections (
            id SERIAL PRIMARY KEY,
            title VARCHAR(255) NOT NULL,
            status VARCHAR(20) NOT NULL DEFAULT 'DRAFT'
                CHECK (status IN ('DRAFT', 'ACTIVE', 'COMPLETED', 'CANCELLED')),
            total_candidates INTEGER NOT NULL DEFAULT 0,
            total_voters INTEGER NOT NULL DEFAULT 0,
            start_time TIMESTAMPTZ,
            end_time TIMESTAMPTZ,
            winner_candidate_id INTEGER,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );

        CREATE TABLE IF NOT EXISTS election_admins (
            election_id INTEGER NOT NULL REFERENCES elections(id) ON DELETE CASCADE,
            user_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            PRIMARY KEY (election_id, user_id)
        );

        CREATE TABLE IF NOT EXISTS election_voters (
            election_id INTEGER NOT NULL REFERENCES elections(id) ON DELETE CASCADE,
            user_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            PRIMARY KEY (election_id, user_id)
        );

        CREATE TABLE IF NOT EXISTS candidates (
            id SERIAL PRIMARY KEY,
            election_id INTEGER NOT NULL REFERENCES elections(id) ON DELETE CASCADE,
            user_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            party_name VARCHAR(255) NOT NULL,
            symbol VARCHAR(255) NOT NULL,
            manifesto TEXT NOT NULL DEFAULT '',
            age INTEGER NOT NULL CHECK (age > 0 AND age < 150),
            qualification VARCHAR(255) NOT NULL,
            total_votes INTEGER NOT NULL DEFAULT 0,
            status VARCHAR(20) NOT NULL DEFAULT 'PENDING'
                CHECK (status IN ('PENDING', 'APPROVED', 'REJECTED')),
            registered_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT uq_candidates_election_user UNIQUE (election_id, user_id)
        );

        CREATE INDEX IF NOT EXISTS idx_candidates_election_status_votes
        ON candidates(election_id, status, total_votes DESC);

        CREATE INDEX IF NOT EXISTS idx_candidates_user_id
        ON candidates(user_id);

        ALTER TABLE elections
        ADD CONSTRAINT fk_elections_winner_candidate
        FOREIGN KEY (winner_candidate_id) REFERENCES candidates(id) ON DELETE SET NULL;

        CREATE TABLE IF NOT EXISTS votes (
            id SERIAL PRIMARY KEY,
            election_id INTEGER NOT NULL REFERENCES elections(id) ON DELETE CASCADE,
            candidate_id INTEGER NOT NULL REFERENCES candidates(id) ON DELETE CASCADE,
            voter_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            cast_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT uq_votes_election_voter UNIQUE (election_id, voter_id)
        );

        CREATE TABLE IF NOT EXISTS election_results (
            id SERIAL PRIMARY KEY,
            election_id INTEGER NOT NULL UNIQUE
                REFERENCES elections(id) ON DELETE CASCADE,
            total_votes INTEGER NOT NULL DEFAULT 0,
            voter_turnout_percentage NUMERIC(7, 2) NOT NULL DEFAULT 0,
            winner_candidate_id INTEGER REFERENCES candidates(id) ON DELETE SET NULL,
            remarks TEXT,
            result_generated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)


def downgrade() -> None:
    """Rollback migration: drop candidacy and result tables."""
    op.execute("""
        DROP TABLE IF EXISTS election_results;
        DROP TABLE IF EXISTS votes;
        ALTER TABLE IF EXISTS elections
            DROP CONSTRAINT IF EXISTS fk_elections_winner_candidate;
        DROP TABLE IF EXISTS candidates;
        DROP TABLE IF EXISTS election_voters;
        DROP TABLE IF EXISTS election_admins;
        DROP TABLE IF EXISTS elections;
        DROP TABLE IF EXISTS users;
    """)
