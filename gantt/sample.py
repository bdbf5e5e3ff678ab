from datetime import date, timedelta


def demo_payload(today=None) -> dict:
    """A small project shaped like the records the dashboard fetches, dated around today."""
    today = today or date.today()

    def d(offset):
        return (today + timedelta(days=offset)).isoformat()

    return {
        "project": {
            "target_online_date": d(35),
            "target_offline_date": d(80),
            "delivery_date": d(60),
        },
        "tasks": [
            {"id": 1, "title": "Shop drawings", "status": "Completed", "start_date": d(-20), "due_date": d(-6)},
            {"id": 2, "title": "Foundation pour", "status": "In Progress", "start_date": d(-3), "due_date": d(12)},
            {"id": 3, "title": "Steel erection", "status": "Not Started", "start_date": d(14), "due_date": d(40)},
            {"id": 4, "title": "Electrical rough-in", "status": "Blocked", "start_date": d(20), "due_date": d(20)},
        ],
        "milestones": [
            {"id": 1, "name": "Permit issued", "due_date": d(-10), "status": "Completed"},
            {"id": 2, "name": "Dry-in", "due_date": d(45), "status": "Pending"},
        ],
        "rfis": [
            {"id": 7, "number": 7, "subject": "Anchor bolt spacing", "due_date": d(5), "status": "Open"},
            {"id": 8, "number": 12, "subject": "Roof drain location", "due_date": d(18), "status": "Answered"},
        ],
        "submittals": [
            {"id": 3, "spec_section": "05 12 00", "title": "Structural steel", "due_date": d(9), "status": "Approved as Noted"},
            {"id": 4, "spec_section": "07 54 00", "title": "TPO roofing", "due_date": d(28), "status": "Revise and Resubmit"},
        ],
    }
