# ======================= CARDS ==========================

# `interval` holds the step index into the review ladder (utils/srs.py).
card_schema = '''
    CREATE TABLE IF NOT EXISTS cards (
        front TEXT PRIMARY KEY,
        back TEXT NOT NULL,
        interval INTEGER NOT NULL DEFAULT 0,

        -- Metadata
        created_at TEXT DEFAULT CURRENT_TIMESTAMP,
        updated_at TEXT DEFAULT CURRENT_TIMESTAMP
    )
'''
