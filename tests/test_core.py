import random
import unittest

from event_scheduler.chromosome import Schedule
from event_scheduler.errors import NoRoomAvailable
from event_scheduler.evaluation import count_conflicts, evaluate
from event_scheduler.model import Event
from event_scheduler.problem import ProblemInstance, build_rooms
from event_scheduler.timeslots import SlotAxis

from helpers import two_room_problem


def make_schedule(problem, placements):
    events = [
        Event(tpl.id, tpl.name, problem.rooms[room], slot)
        for tpl, (room, slot) in zip(problem.events, placements)
    ]
    return Schedule(problem, events)


class EvaluationTests(unittest.TestCase):
    def test_double_booking_counts_once(self):
        problem = two_room_problem()
        sched = make_schedule(problem, [(0, 0), (0, 0)])
        self.assertEqual(sched.conflicts, 1)
        self.assertEqual(sched.fitness, 0.5)

    def test_unavailable_room_counts_once(self):
        problem = two_room_problem()
        sched = make_schedule(problem, [(1, 0), (0, 1)])
        self.assertEqual(sched.conflicts, 1)
        self.assertEqual(sched.fitness, 0.5)

    def test_conflict_free_schedule_is_perfect(self):
        problem = two_room_problem()
        sched = make_schedule(problem, [(0, 0), (1, 1)])
        self.assertEqual(sched.conflicts, 0)
        self.assertEqual(sched.fitness, 1.0)

    def test_three_events_in_one_cell_count_every_pair(self):
        problem = two_room_problem(n_events=3)
        sched = make_schedule(problem, [(1, 0), (1, 0), (1, 0)])
        # 3 aulas no disponibles + 3 pares
        self.assertEqual(count_conflicts(sched.events, problem), 6)
        self.assertAlmostEqual(sched.fitness, 1 / 7)

    def test_fitness_range_on_random_schedules(self):
        problem = two_room_problem(n_events=5)
        rng = random.Random(7)
        for _ in range(50):
            sched = Schedule.random_for(problem, rng)
            self.assertGreater(sched.fitness, 0.0)
            self.assertLessEqual(sched.fitness, 1.0)
            self.assertEqual(sched.fitness == 1.0, sched.conflicts == 0)

    def test_unassigned_event_is_rejected(self):
        problem = two_room_problem()
        sched = Schedule(problem, [Event(0, "A"), Event(1, "B")])
        with self.assertRaises(ValueError):
            sched.fitness


class ScheduleTests(unittest.TestCase):
    def test_initialize_assigns_every_event_to_an_available_room(self):
        problem = two_room_problem(n_events=6)
        sched = Schedule.random_for(problem, random.Random(1))
        self.assertEqual(len(sched), 6)
        self.assertEqual([ev.id for ev in sched.events], list(range(6)))
        for ev in sched.events:
            self.assertTrue(ev.is_assigned)
            self.assertTrue(ev.room.is_available(ev.time_slot))

    def test_schedules_never_share_events(self):
        problem = two_room_problem()
        rng = random.Random(3)
        s1, s2 = Schedule.random_for(problem, rng), Schedule.random_for(problem, rng)
        for e1, e2 in zip(s1.events, s2.events):
            self.assertIsNot(e1, e2)
            self.assertIsNot(e1, problem.events[e1.id])

    def test_events_handed_to_a_schedule_are_copied(self):
        problem = two_room_problem()
        rooms = problem.rooms
        shared = [Event(0, "Event 1", rooms[0], 0), Event(1, "Event 2", rooms[0], 1)]
        s1 = Schedule(problem, shared)
        self.assertEqual(s1.fitness, 1.0)
        s2 = Schedule(problem, shared)
        for i in range(2):
            self.assertIsNot(s1.events[i], s2.events[i])
            self.assertIsNot(s1.events[i], shared[i])

        s1.events[1].time_slot = 0
        self.assertEqual(s1.fitness, 0.5)
        self.assertEqual(s1.fitness, evaluate(s1))
        self.assertEqual(s2.fitness, 1.0)

        shared[0].time_slot = 2
        self.assertEqual(s1.events[0].time_slot, 0)
        self.assertEqual(s1.fitness, 0.5)

    def test_assign_invalidates_cached_fitness(self):
        problem = two_room_problem()
        sched = make_schedule(problem, [(0, 0), (0, 0)])
        self.assertEqual(sched.fitness, 0.5)
        sched.assign(1, problem.rooms[0], 1)
        self.assertEqual(sched.fitness, 1.0)

    def test_direct_event_write_invalidates_cached_fitness(self):
        problem = two_room_problem()
        sched = make_schedule(problem, [(0, 0), (0, 1)])
        self.assertEqual(sched.fitness, 1.0)
        sched.events[1].time_slot = 0
        self.assertEqual(sched.fitness, 0.5)
        sched.events[0].room = problem.rooms[1]
        self.assertEqual(sched.conflicts, 1)
        self.assertEqual(sched.fitness, evaluate(sched))

    def test_copy_is_independent(self):
        problem = two_room_problem()
        sched = make_schedule(problem, [(0, 0), (0, 1)])
        clone = sched.copy()
        self.assertTrue(clone.same_assignments(sched))
        clone.assign(0, problem.rooms[0], 1)
        self.assertEqual(sched.fitness, 1.0)
        self.assertEqual(clone.fitness, 0.5)
        self.assertFalse(clone.same_assignments(sched))

    def test_no_room_available_is_raised(self):
        axis = SlotAxis.from_clock("09:00 AM", "11:00 AM")
        problem = ProblemInstance(
            rooms=build_rooms([[False, False]]),
            events=(Event(0, "Solo"),),
            axis=axis,
        )
        with self.assertRaises(NoRoomAvailable):
            Schedule.random_for(problem, random.Random(0))

    def test_str_renders_room_and_time(self):
        problem = two_room_problem()
        sched = make_schedule(problem, [(0, 0), (1, 2)])
        self.assertEqual(
            str(sched),
            "Event 1, Room: Room A, Time: 09:00 AM, Event 2, Room: Room B, Time: 11:00 AM",
        )


if __name__ == "__main__":
    unittest.main()
