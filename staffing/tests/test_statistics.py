from datetime import date
import contextlib
import io
import unittest
from staffing.domain.Employee import Employee
from staffing.domain.PlanBuilder import PlanBuilder
from staffing.domain.PlanningSystem import PlanningSystem
from staffing.domain.Project import Project
from staffing.logic.calendar.working_days import Month
from staffing.logic.reporting.statistics import PlanningStatistics, junior_filter


def _ten_project_plan():
    """Carla works on all 10 projects, Bart on 9, Anna only manages."""
    anna, bart, carla = Employee(1, "Anna", 60), Employee(2, "Bart", 20), Employee(3, "Carla", 40)
    builder = PlanBuilder("ten", 2019).add_employee(bart).add_employee(carla)
    for i in range(10):
        code = f"P{i:02d}"
        builder.add_project(Project(code, f"Project {i}", date(2019, 3, 4), date(2019, 3, 8)), anna)
        builder.add_commitment(code, 3, 1)
        if i < 9:
            builder.add_commitment(code, 2, 1)
    return builder.build()


class TestPlanningStatistics(unittest.TestCase):

    def test_end_to_end_example(self):
        e1 = Employee(1, "E1", 50)
        plan = (PlanBuilder("example", 2019)
                .add_project(Project("P1", "P1", date(2019, 3, 4), date(2019, 3, 6)), e1)
                .add_commitment("P1", 1, 4)
                .build())
        stats = PlanningStatistics(plan)
        self.assertEqual(plan.get_project("P1").num_working_days, 3)
        self.assertEqual(stats.total_manpower_budget(), 600)
        self.assertEqual(stats.managed_budget_overview(lambda e: True), {e1: 600})
        self.assertEqual(stats.most_involved_employees(), [])
        self.assertEqual(stats.cumulative_monthly_spends(), {Month.MARCH: 600})
        self.assertEqual(stats.longest_project().code, "P1")
        self.assertEqual(stats.average_hourly_wage(), 50.0)

    def test_empty_plan(self):
        stats = PlanningStatistics(PlanningSystem())
        self.assertEqual(stats.average_hourly_wage(), 0.0)
        self.assertIsNone(stats.longest_project())
        self.assertEqual(stats.most_involved_employees(), [])
        self.assertEqual(stats.total_manpower_budget(), 0)
        self.assertEqual(stats.managed_budget_overview(lambda e: True), {})
        self.assertEqual(stats.cumulative_monthly_spends(), {})

    def test_average_hourly_wage(self):
        plan = PlanBuilder().add_employee(Employee(1, "A", 20)).add_employee(Employee(2, "B", 25)).build()
        self.assertAlmostEqual(PlanningStatistics(plan).average_hourly_wage(), 22.5)

    def test_longest_project(self):
        anna = Employee(1, "Anna", 50)
        plan = (PlanBuilder()
                .add_project(Project("A", "Short", date(2019, 3, 4), date(2019, 3, 5)), anna)
                .add_project(Project("B", "Long", date(2019, 3, 4), date(2019, 3, 15)), anna)
                .add_project(Project("C", "Also long", date(2019, 4, 1), date(2019, 4, 12)), anna)
                .build())
        longest = PlanningStatistics(plan).longest_project()
        self.assertIn(longest.code, ("B", "C"))
        self.assertEqual(longest.num_working_days, 10)

    def test_most_involved_threshold(self):
        stats = PlanningStatistics(_ten_project_plan())
        self.assertEqual([e.number for e in stats.most_involved_employees()], [3])
        self.assertEqual([e.name for e in stats.most_involved_employees(min_count=9)], ["Bart", "Carla"])

    def test_most_involved_ordered_by_name(self):
        plan = _ten_project_plan()
        plan.add_employee(Employee(4, "Aaron", 30))
        for project in plan.projects:
            plan.add_commitment(project.code, 4, 2)
        names = [e.name for e in PlanningStatistics(plan).most_involved_employees()]
        self.assertEqual(names, ["Aaron", "Carla"])

    def test_managed_budget_overview_filter(self):
        plan = _ten_project_plan()
        stats = PlanningStatistics(plan)
        juniors = stats.managed_budget_overview(junior_filter(30))
        self.assertEqual(juniors, {plan.get_employee(2): 0})
        seniors = stats.managed_budget_overview(lambda e: e.hourly_wage > 30)
        # 10 projects * 5 days * 40, plus 9 projects * 5 days * 20
        self.assertEqual(seniors, {plan.get_employee(1): 2000 + 900, plan.get_employee(3): 0})
        self.assertEqual(stats.total_manpower_budget(), 2900)

    def test_cumulative_monthly_spends_merges_projects(self):
        anna, bart = Employee(1, "Anna", 50), Employee(2, "Bart", 20)
        plan = (PlanBuilder()
                .add_employee(bart)
                .add_project(Project("A", "Spring", date(2019, 3, 25), date(2019, 4, 5)), anna)
                .add_project(Project("B", "Next spring", date(2020, 3, 2), date(2020, 3, 6)), anna)
                .add_project(Project("C", "Weekend", date(2019, 6, 1), date(2019, 6, 2)), anna)
                .add_project(Project("D", "Uncommitted", date(2019, 7, 1), date(2019, 7, 31)), anna)
                .add_commitment("A", 1, 2)
                .add_commitment("B", 2, 5)
                .add_commitment("C", 1, 8)
                .build())
        spends = PlanningStatistics(plan).cumulative_monthly_spends()
        self.assertEqual(spends, {Month.MARCH: 5 * 100 + 5 * 100, Month.APRIL: 5 * 100})
        self.assertEqual(list(spends), [Month.MARCH, Month.APRIL])
        self.assertNotIn(Month.JUNE, spends)
        self.assertNotIn(Month.JULY, spends)

    def test_generate_report(self):
        report = PlanningStatistics(_ten_project_plan()).generate_report(max_wage=30)
        self.assertEqual(report["employee_count"], 3)
        self.assertEqual(report["project_count"], 10)
        self.assertEqual(report["average_hourly_wage"], 40.0)
        self.assertEqual(report["longest_project"]["working_days"], 5)
        self.assertEqual(report["most_involved_employees"], [{"number": 3, "name": "Carla"}])
        self.assertEqual(report["managed_budget_overview"][0]["managed_budget"], 0)
        self.assertEqual(report["cumulative_monthly_spends"],
                         [{"month": "March", "month_number": 3, "spend": 2900}])

    def test_print_report(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            PlanningStatistics(_ten_project_plan()).print_report()
        text = out.getvalue()
        self.assertIn("3 employees have been assigned to 10 projects", text)
        self.assertIn("The total budget of committed project manpower is 2900", text)
        self.assertIn("'MARCH': 2900", text)

        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            PlanningStatistics(PlanningSystem()).print_report()
        self.assertIn("No employees or projects have been set up...", out.getvalue())


if __name__ == '__main__':
    unittest.main()
