import io
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

HEADER_STYLE = TableStyle([
    ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#2E5C8A")),
    ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
    ("ALIGN", (0,0), (-1,-1), "CENTER"),
    ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
    ("FONTSIZE", (0,0), (-1,0), 11),
    ("BOTTOMPADDING", (0,0), (-1,0), 8),
    ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
])


def _table(rows):
    table = Table(rows, repeatRows=1)
    table.setStyle(HEADER_STYLE)
    return table


def generate_pdf_for_statistics(report):
    """Render a statistics report (PlanningStatistics.generate_report) as PDF bytes."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Project Statistics – {report.get('name', '')}, {report.get('planning_year', '')}", styles["Title"]),
        Paragraph(f"{report.get('employee_count', 0)} employees, {report.get('project_count', 0)} projects", styles["Normal"]),
        Spacer(1, 12),
    ]

    longest = report.get("longest_project")
    summary = [
        ["Figure", "Value"],
        ["Average hourly wage", f"{report.get('average_hourly_wage', 0.0):.2f}"],
        ["Longest project", f"{longest['name']} ({longest['working_days']} working days)" if longest else "-"],
        ["Total manpower budget", str(report.get("total_manpower_budget", 0))],
    ]
    elements += [_table(summary), Spacer(1, 12)]

    elements.append(Paragraph(
        f"Employees in at least {report.get('min_assignment_count', '')} projects", styles["Heading3"]))
    involved = [["Number", "Name"]] + [
        [str(e["number"]), e["name"]] for e in report.get("most_involved_employees", [])
    ]
    elements += [_table(involved), Spacer(1, 12)]

    elements.append(Paragraph(
        f"Managed budget by junior employees (hourly wage <= {report.get('junior_wage_limit', '')})", styles["Heading3"]))
    managed = [["Number", "Name", "Hourly wage", "Managed budget"]] + [
        [str(e["number"]), e["name"], str(e["hourly_wage"]), str(e["managed_budget"])]
        for e in report.get("managed_budget_overview", [])
    ]
    elements += [_table(managed), Spacer(1, 12)]

    elements.append(Paragraph("Cumulative monthly spends", styles["Heading3"]))
    monthly = [["Month", "Spend"]] + [
        [m["month"], str(m["spend"])] for m in report.get("cumulative_monthly_spends", [])
    ]
    elements.append(_table(monthly))

    doc.build(elements)
    return buf.getvalue()
