import io

from labkit.jobs import MAXJOBS, JobList, JobState


def make(**kwargs):
    out = io.StringIO()
    return JobList(out=out, **kwargs), out


def test_add_assigns_sequential_jids():
    jobs, _ = make()
    assert jobs.add(100, JobState.BG, "a\n") is True
    assert jobs.add(200, JobState.FG, "b\n") is True
    assert [(job.pid, job.jid) for job in jobs] == [(100, 1), (200, 2)]


def test_add_rejects_nonpositive_pid():
    jobs, _ = make()
    assert jobs.add(0, JobState.BG, "a\n") is False
    assert jobs.add(-5, JobState.BG, "a\n") is False
    assert list(jobs) == []


def test_add_when_full_reports_and_fails():
    jobs, out = make(max_jobs=2)
    jobs.add(1, JobState.BG, "a\n")
    jobs.add(2, JobState.BG, "b\n")
    assert jobs.add(3, JobState.BG, "c\n") is False
    assert out.getvalue() == "Tried to create too many jobs\n"
    assert jobs.get_by_pid(3) is None


def test_next_jid_wraps_after_last_slot():
    jobs, _ = make(max_jobs=2)
    jobs.add(1, JobState.BG, "a\n")
    jobs.add(2, JobState.BG, "b\n")
    assert jobs.next_jid == 1


def test_delete_resets_next_jid_to_after_largest():
    jobs, _ = make()
    for pid in (10, 20, 30):
        jobs.add(pid, JobState.BG, "x\n")
    assert jobs.delete(20) is True
    largest = jobs.max_jid()
    jobs.add(40, JobState.BG, "y\n")
    assert jobs.get_by_pid(40).jid == largest + 1


def test_full_list_then_delete_and_add():
    jobs, _ = make()
    for pid in range(1, MAXJOBS + 1):
        assert jobs.add(pid, JobState.BG, "x\n")
    assert jobs.max_jid() == MAXJOBS
    jobs.delete(1)
    assert jobs.add(99, JobState.BG, "y\n")
    assert jobs.get_by_pid(99).jid == MAXJOBS + 1


def test_delete_missing_and_invalid():
    jobs, _ = make()
    jobs.add(7, JobState.BG, "a\n")
    assert jobs.delete(7) is True
    assert jobs.delete(7) is False
    assert jobs.delete(0) is False
    assert jobs.get_by_pid(7) is None


def test_fg_pid():
    jobs, _ = make()
    assert jobs.fg_pid() == 0
    jobs.add(5, JobState.BG, "a\n")
    jobs.add(6, JobState.FG, "b\n")
    assert jobs.fg_pid() == 6


def test_lookups():
    jobs, _ = make()
    jobs.add(42, JobState.ST, "a\n")
    job = jobs.get_by_jid(1)
    assert job.pid == 42
    assert jobs.get_by_pid(42) is job
    assert jobs.get_by_jid(0) is None
    assert jobs.get_by_pid(0) is None
    assert jobs.pid_to_jid(42) == 1
    assert jobs.pid_to_jid(43) == 0
    assert jobs.pid_to_jid(0) == 0


def test_max_jid_empty():
    jobs, _ = make()
    assert jobs.max_jid() == 0


def test_format_jobs():
    jobs, _ = make()
    jobs.add(10, JobState.BG, "sleep 1 &\n")
    jobs.add(11, JobState.ST, "sleep 2\n")
    jobs.add(12, JobState.FG, "sleep 3\n")
    assert jobs.format_jobs() == (
        "[1] (10) Running sleep 1 &\n"
        "[2] (11) Stopped sleep 2\n"
        "[3] (12) Foreground sleep 3\n"
    )


def test_format_jobs_undefined_state():
    jobs, _ = make()
    jobs.add(10, JobState.UNDEF, "cmd\n")
    assert jobs.format_jobs() == "[1] (10) listjobs: Internal error: job[0].state=0 cmd\n"


def test_verbose_add_message():
    jobs, out = make(verbose=True)
    jobs.add(10, JobState.BG, "prog")
    assert out.getvalue() == "Added job [1] 10 prog\n"


def test_state_changes_are_visible():
    jobs, _ = make()
    jobs.add(10, JobState.FG, "x\n")
    jobs.get_by_pid(10).state = JobState.ST
    assert jobs.fg_pid() == 0
    assert jobs.get_by_jid(1).state is JobState.ST