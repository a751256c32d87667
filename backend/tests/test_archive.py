from province_portal.domain.archive import group_archive


class TestGroupArchive:
    def test_groups_years_and_months_newest_first(self):
        rows = [(2023, 11, 1), (2024, 1, 2), (2024, 3, 1), (2023, 12, 4)]

        archive = group_archive(rows)

        assert list(archive) == [2024, 2023]
        assert archive[2024] == [{"month": 3, "count": 1}, {"month": 1, "count": 2}]
        assert archive[2023] == [{"month": 12, "count": 4}, {"month": 11, "count": 1}]

    def test_repeated_periods_are_summed(self):
        assert group_archive([(2024, 5, 1), (2024, 5, 2)]) == {2024: [{"month": 5, "count": 3}]}

    def test_empty_input(self):
        assert group_archive([]) == {}
