"""Example: run the productivity engine through the service layer (no Flask).

Punch records and settings come in the same shapes the attendance and settings
stores return them.
"""

from datetime import date

from src.workforce_payroll.workforce_payroll.attendance.ingest import punches_from_records
from src.workforce_payroll.workforce_payroll.container import build_container
from src.workforce_payroll.workforce_payroll.payroll.report import build_report_data
from src.workforce_payroll.workforce_payroll.schedules.settings import schedule_from_settings
from src.workforce_payroll.workforce_payroll.users.ingest import worker_from_record


def main():
    container = build_container()
    records = [
        {"date": "2025-06-02", "time": "9:12:40 AM", "presence": "IN", "rfid": "RF-001"},
        {"date": "2025-06-02", "time": "6:48:05 PM", "presence": "OUT", "rfid": "RF-001"},
        {"date": "2025-06-03", "time": "8:58:00 AM", "presence": "IN", "rfid": "RF-001"},
    ]
    settings = {
        "batches": [{"name": "General", "startTime": "09:00", "endTime": "19:00"}],
        "selectedBatchName": "General",
        "lunchFrom": "13:00",
        "lunchTo": "14:00",
        "breakIntervals": [{"from": "16:00", "to": "16:15", "isPaid": True}],
        "permissionGraceMinutes": 10,
    }

    report = container.productivity_service.compute_productivity(
        punches_from_records(records),
        date(2025, 6, 1),
        date(2025, 6, 7),
        schedule_from_settings(settings),
        worker_from_record({"name": "Ravi", "salary": 26000, "rfid": "RF-001"}),
    )
    data = build_report_data(report, currency_symbol=container.currency_symbol)
    for row in data.rows:
        print(row["date"], row["status"], row["first_in"], row["last_out"], row["worked_hours"], row["deduction"])
    print(data.summary["final_salary"])


if __name__ == "__main__":
    main()
