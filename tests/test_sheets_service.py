from conftest import FakeWorksheet

from models.session import Profile
from services.sheets_service import HEADER, SheetsProfileRepository


def profile(**overrides):
    data = dict(
        user_id=42,
        chat_id=1001,
        niche="IT language school",
        keywords="english, relocation, visas",
        country="Germany",
    )
    data.update(overrides)
    return Profile(**data)


def rows_for(worksheet, user_id):
    return [row for row in worksheet.rows[1:] if str(row[0]) == str(user_id)]


async def test_new_user_is_appended(repository, worksheet):
    assert await repository.save(profile()) is True

    assert len(worksheet.rows) == 2
    row = worksheet.rows[1]
    assert row[:5] == [42, 1001, "IT language school", "english, relocation, visas", "Germany"]
    # created_at и updated_at совпадают
    assert row[5] == row[6]
    assert row[5].endswith("Z")


async def test_repeated_save_updates_row_in_place(repository, worksheet):
    worksheet.rows.append(["7", "700", "other", "kw", "France", "t", "t"])

    assert await repository.save(profile()) is True
    assert await repository.save(profile(niche="Yoga studio", country="Spain")) is True

    assert len(rows_for(worksheet, 42)) == 1
    # Чужая строка не тронута, наша осталась на своей позиции
    assert worksheet.rows[1][0] == "7"
    assert worksheet.rows[2][2:5] == ["Yoga studio", "english, relocation, visas", "Spain"]


async def test_existing_row_keeps_position(worksheet):
    worksheet.rows.append(["42", "1001", "old", "old", "old", "t0", "t0"])
    worksheet.rows.append(["99", "9900", "x", "y", "z", "t1", "t1"])
    repo = SheetsProfileRepository(worksheet=worksheet)

    assert await repo.save(profile()) is True

    assert len(worksheet.rows) == 3
    assert worksheet.rows[1][2] == "IT language school"
    assert worksheet.calls.count("append_row") == 0


async def test_empty_sheet_gets_header_first():
    worksheet = FakeWorksheet()
    repo = SheetsProfileRepository(worksheet=worksheet)

    assert await repo.save(profile()) is True
    assert await repo.save(profile(country="Poland")) is True

    assert worksheet.rows[0] == HEADER
    assert len(rows_for(worksheet, 42)) == 1
    assert worksheet.rows[1][4] == "Poland"


async def test_read_failure_returns_false_and_writes_nothing():
    worksheet = FakeWorksheet(rows=[HEADER], fail_on={"get_values"})
    repo = SheetsProfileRepository(worksheet=worksheet)

    assert await repo.save(profile()) is False
    assert worksheet.rows == [HEADER]


async def test_append_failure_returns_false():
    worksheet = FakeWorksheet(rows=[HEADER], fail_on={"append_row"})
    repo = SheetsProfileRepository(worksheet=worksheet)

    assert await repo.save(profile()) is False
    assert len(worksheet.rows) == 1


async def test_bad_credentials_are_a_persistence_failure():
    repo = SheetsProfileRepository(sheet_id="sheet", credentials_json="not json")
    assert await repo.save(profile()) is False


def test_find_row_skips_header():
    rows = [["42", "header-looking"], ["1"], [], ["42", "1001"]]
    assert SheetsProfileRepository.find_row(rows, 42) == 4
    assert SheetsProfileRepository.find_row(rows, 5) is None


async def test_update_failure_returns_false_and_keeps_row():
    old_row = ["42", "1001", "old", "old", "old", "t0", "t0"]
    worksheet = FakeWorksheet(rows=[HEADER, old_row], fail_on={"update"})
    repo = SheetsProfileRepository(worksheet=worksheet)

    assert await repo.save(profile()) is False
    assert worksheet.rows == [HEADER, old_row]
    assert "append_row" not in worksheet.calls
