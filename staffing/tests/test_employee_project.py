from datetime import date
import unittest
from staffing.domain.Employee import Employee
from staffing.domain.Project import Project


class TestEmployeeProject(unittest.TestCase):

    def setUp(self):
        self.anna = Employee(1, "Anna", 50)
        self.bart = Employee(2, "Bart", 25)
        self.pilot = Project("P1", "Pilot", date(2019, 3, 4), date(2019, 3, 6))
        self.rollout = Project("P2", "Rollout", date(2019, 3, 4), date(2019, 3, 15))

    def test_identity_by_key(self):
        self.assertEqual(self.anna, Employee(1, "Someone else", 99))
        self.assertEqual(len({self.anna, Employee(1, "Copy", 10)}), 1)
        self.assertEqual(self.pilot, Project("P1"))
        self.assertEqual(sorted([self.rollout, self.pilot]), [self.pilot, self.rollout])
        self.assertEqual(sorted([self.bart, self.anna]), [self.anna, self.bart])

    def test_commitments_accumulate(self):
        self.pilot.add_commitment(self.anna, 4)
        self.pilot.add_commitment(self.anna, 2)
        self.assertEqual(self.pilot.committed_hours_per_day, {self.anna: 6})

    def test_working_days_follow_date_range(self):
        self.assertEqual(self.pilot.num_working_days, 3)
        self.pilot.end_date = date(2019, 3, 8)
        self.assertEqual(self.pilot.num_working_days, 5)
        self.pilot.add_commitment(self.anna, 8)
        self.assertEqual(self.pilot.num_working_days, 5)

    def test_assigned_projects_is_computed(self):
        projects = [self.pilot, self.rollout]
        self.assertEqual(self.anna.get_assigned_projects(projects), set())
        self.pilot.add_commitment(self.anna, 4)
        self.rollout.add_commitment(self.bart, 0)
        self.assertEqual(self.anna.get_assigned_projects(projects), {self.pilot})
        self.assertEqual(self.bart.get_assigned_projects(projects), set())

    def test_to_dict(self):
        self.assertEqual(self.pilot.to_dict(), {"code": "P1", "name": "Pilot", "start_date": "2019-03-04",
                                                "end_date": "2019-03-06", "manager": None})
        self.pilot.manager = self.anna
        self.assertEqual(self.pilot.to_dict()["manager"], 1)
        self.assertEqual(self.anna.to_dict(), {"number": 1, "name": "Anna", "hourly_wage": 50})


if __name__ == '__main__':
    unittest.main()
