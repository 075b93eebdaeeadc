# scripts/export_scan_history.py
import argparse
from pathlib import Path

from skillscan.db.session import SessionLocal
from skillscan.services.export import scan_history_frame

OUT = Path("data/exports/scan_history.csv")

def main():
    ap = argparse.ArgumentParser(description="Export scan history to CSV")
    ap.add_argument("--role-id", type=int, default=None, help="annotate rows with match %% for this job role")
    ap.add_argument("--search", default=None, help="only rows whose name/email/phone contain this")
    ap.add_argument("--out", type=Path, default=OUT)
    args = ap.parse_args()

    with SessionLocal() as db:
        df = scan_history_frame(db, job_role_id=args.role_id, search=args.search)

    args.out.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.out, index=False)
    print(f"✅ Wrote {len(df)} rows to {args.out}")

if __name__ == "__main__":
    main()
