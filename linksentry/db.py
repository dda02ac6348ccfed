# db.py
"""
Database module using SQLAlchemy (SQLite).
Keeps a history of URL analyses: input, normalized URL, level, score and the full result.
"""

import os
import json
from datetime import datetime
from typing import Dict, Any, List, Optional

from sqlalchemy import create_engine, Column, Integer, Text, DateTime
from sqlalchemy.orm import sessionmaker, declarative_base

DB_FILE = os.getenv("LINKSENTRY_DB", "linksentry.db")
DATABASE_URL = f"sqlite:///{DB_FILE}"

engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)
Base = declarative_base()


class Scan(Base):
    __tablename__ = "scans"
    id = Column(Integer, primary_key=True, index=True)
    url = Column(Text, index=True)
    normalized_url = Column(Text, index=True)
    risk_level = Column(Text)
    score = Column(Integer)
    result_json = Column(Text)  # full AnalysisResult as JSON
    created_at = Column(DateTime, default=datetime.utcnow)


def init_db():
    Base.metadata.create_all(bind=engine)


def save_scan(url: str, normalized_url: str, risk_level: str, score: int, result: Dict[str, Any]) -> int:
    with SessionLocal() as session:
        scan = Scan(
            url=url,
            normalized_url=normalized_url,
            risk_level=risk_level,
            score=score,
            result_json=json.dumps(result),
        )
        session.add(scan)
        session.commit()
        session.refresh(scan)
        return scan.id


def get_scan(scan_id: int) -> Optional[Dict[str, Any]]:
    with SessionLocal() as session:
        scan = session.get(Scan, scan_id)
    if not scan:
        return None
    return {
        "id": scan.id,
        "url": scan.url,
        "normalized_url": scan.normalized_url,
        "risk_level": scan.risk_level,
        "score": scan.score,
        "result": json.loads(scan.result_json),
        "created_at": scan.created_at.isoformat(),
    }


def list_scans(limit: int = 50, offset: int = 0) -> List[Dict[str, Any]]:
    with SessionLocal() as session:
        rows = (session.query(Scan)
                .order_by(Scan.created_at.desc(), Scan.id.desc())
                .offset(offset).limit(limit).all())
    return [
        {
            "id": r.id,
            "url": r.url,
            "normalized_url": r.normalized_url,
            "risk_level": r.risk_level,
            "score": r.score,
            "created_at": r.created_at.isoformat(),
        }
        for r in rows
    ]
