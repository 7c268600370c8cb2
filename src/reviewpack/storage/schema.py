"""Database schema for .reviewpack files."""

SCHEMA = """
-- Reviewed files: one row per file, replaced on re-review
CREATE TABLE IF NOT EXISTS files (
    path TEXT PRIMARY KEY,
    language TEXT,
    rule_set TEXT,
    summary TEXT NOT NULL,
    total_chunks INTEGER NOT NULL,
    max_tokens INTEGER,
    overlap_tokens INTEGER,
    total_lines INTEGER NOT NULL DEFAULT 0,
    code_lines INTEGER NOT NULL DEFAULT 0,
    comment_lines INTEGER NOT NULL DEFAULT 0,
    complexity INTEGER NOT NULL DEFAULT 1,
    tokens INTEGER NOT NULL DEFAULT 0,
    reviewed_at TEXT
);

-- Chunk manifest: which original lines each chunk covered
CREATE TABLE IF NOT EXISTS chunks (
    file_path TEXT NOT NULL,
    number INTEGER NOT NULL,
    start_line INTEGER NOT NULL,
    end_line INTEGER NOT NULL,
    overlap_lines INTEGER NOT NULL DEFAULT 0,
    tokens INTEGER NOT NULL,
    PRIMARY KEY (file_path, number),
    FOREIGN KEY (file_path) REFERENCES files(path)
);

-- Findings in original-file line numbers
CREATE TABLE IF NOT EXISTS findings (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    file_path TEXT NOT NULL,
    chunk_number INTEGER,          -- NULL when the file was reviewed whole
    line INTEGER NOT NULL,
    severity TEXT NOT NULL,
    severity_rank INTEGER NOT NULL,
    rule TEXT,
    message TEXT NOT NULL,
    code TEXT,
    FOREIGN KEY (file_path) REFERENCES files(path)
);

-- Metadata table: stores reviewpack metadata
CREATE TABLE IF NOT EXISTS metadata (
    key TEXT PRIMARY KEY,
    value TEXT
);

CREATE INDEX IF NOT EXISTS idx_findings_file ON findings(file_path);
"""
