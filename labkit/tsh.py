"""A tiny shell with job control."""

from __future__ import annotations

import getopt
import os
import signal
import sys
import time
from typing import TextIO

from .jobs import MAXJOBS, JobList, JobState
from .testprogs import atoi

MAXLINE = 1024
PROMPT = "tsh> "

_USAGE = (
    "Usage: shell [-hvp]\n"
    "   -h   print this message\n"
    "   -v   print additional diagnostic information\n"
    "   -p   do not emit a command prompt\n"
)

_CHLD_MASK = {signal.SIGCHLD}


def _skip_spaces(buf: str, pos: int) -> int:
    while pos < len(buf) and buf[pos] == " ":
        pos += 1
    return pos


def parseline(cmdline: str) -> tuple[list[str], bool]:
    """Split a command line into arguments; return them and whether to run in the background.

    The last character (the newline) is dropped. Text in single quotes is one
    argument. A blank line counts as a background request with no arguments.
    """
    buf = cmdline[:-1] + " " if cmdline else ""
    argv: list[str] = []
    pos = _skip_spaces(buf, 0)
    while True:
        if pos < len(buf) and buf[pos] == "'":
            pos += 1
            delim = buf.find("'", pos)
        else:
            delim = buf.find(" ", pos)
        if delim < 0:
            break
        argv.append(buf[pos:delim])
        pos = _skip_spaces(buf, delim + 1)

    if not argv:
        return argv, True
    background = argv[-1].startswith("&")
    if background:
        argv.pop()
    return argv, background


def usage(out: TextIO | None = None) -> None:
    """Write the help message."""
    stream = out if out is not None else sys.stdout
    stream.write(_USAGE)
    stream.flush()


class Shell:
    """Reads command lines, runs programs in their own process groups and tracks jobs."""

    def __init__(self, verbose: bool = False, out: TextIO | None = None) -> None:
        self.verbose = verbose
        self.out = out
        self.jobs = JobList(MAXJOBS, verbose, out)

    @property
    def _stream(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._stream.write(text)

    def _flush(self) -> None:
        self._stream.flush()

    def _fatal(self, msg: str, exc: OSError) -> None:
        self._write(f"{msg}: {exc.strerror or exc}\n")
        self._flush()
        raise SystemExit(1)

    def eval(self, cmdline: str) -> None:
        """Run a built-in command at once, or start a job and wait if it is in the foreground."""
        argv, background = parseline(cmdline)
        if not argv:
            return
        if self.builtin_cmd(argv):
            return

        signal.pthread_sigmask(signal.SIG_BLOCK, _CHLD_MASK)
        self._flush()
        try:
            pid = os.fork()
        except OSError as exc:
            signal.pthread_sigmask(signal.SIG_UNBLOCK, _CHLD_MASK)
            self._fatal("Fork error", exc)
        if pid == 0:
            self._exec_child(argv)

        self.jobs.add(pid, JobState.BG if background else JobState.FG, cmdline)
        job = self.jobs.get_by_pid(pid)
        jid = job.jid if job is not None else 0
        signal.pthread_sigmask(signal.SIG_UNBLOCK, _CHLD_MASK)

        if background:
            self._write(f"[{jid}] ({pid}) {cmdline}")
        else:
            self.waitfg(pid)

    def _exec_child(self, argv: list[str]) -> None:
        try:
            signal.pthread_sigmask(signal.SIG_UNBLOCK, _CHLD_MASK)
            os.setpgid(0, 0)
            try:
                os.execve(argv[0], argv, os.environ)
            except OSError:
                self._write(f"{argv[0]}: Command not found\n")
                self._flush()
        finally:
            os._exit(0)

    def builtin_cmd(self, argv: list[str]) -> bool:
        """Run ``argv`` if it is a built-in command and return True; otherwise return False."""
        command = argv[0]
        if command == "quit":
            self._flush()
            raise SystemExit(0)
        if command == "jobs":
            self._write(self.jobs.format_jobs())
            return True
        if command in ("bg", "fg"):
            self.do_bgfg(argv)
            return True
        return command == "&"

    def do_bgfg(self, argv: list[str]) -> None:
        """Continue a job given by PID or %jobid, in the background or foreground."""
        name = argv[0]
        if len(argv) < 2:
            self._write(f"{name} command requires PID or %jobid argument\n")
            return
        target = argv[1]
        if target.startswith("%"):
            job = self.jobs.get_by_jid(atoi(target[1:]))
            if job is None:
                self._write(f"{target}: No such job\n")
                return
        elif target[:1] in "0123456789" and target:
            pid = atoi(target)
            job = self.jobs.get_by_pid(pid)
            if job is None:
                self._write(f"({pid}): No such process\n")
                return
        else:
            self._write(f"{name}: argument must be a PID or %jobid\n")
            return

        try:
            os.kill(-job.pid, signal.SIGCONT)
        except ProcessLookupError:
            pass

        if name == "bg":
            job.state = JobState.BG
            self._write(f"[{job.jid}] ({job.pid}) {job.cmdline}")
        else:
            job.state = JobState.FG
            self.waitfg(job.pid)

    def waitfg(self, pid: int) -> None:
        """Block until ``pid`` is no longer the foreground job."""
        while self.jobs.fg_pid() == pid:
            time.sleep(0.001)

    def sigchld_handler(self, signum, frame) -> None:
        """Reap every finished child and note every stopped one, without blocking."""
        while True:
            try:
                pid, status = os.waitpid(-1, os.WNOHANG | os.WUNTRACED)
            except ChildProcessError:
                return
            if pid == 0:
                return
            job = self.jobs.get_by_pid(pid)
            if job is None:
                continue
            if os.WIFSTOPPED(status):
                job.state = JobState.ST
                self._write(
                    f"Job [{job.jid}] ({pid}) stopped by signal {os.WSTOPSIG(status)}\n"
                )
            elif os.WIFSIGNALED(status):
                self._write(
                    f"Job [{job.jid}] ({pid}) terminated by signal {os.WTERMSIG(status)}\n"
                )
                self.jobs.delete(pid)
            else:
                self.jobs.delete(pid)

    def _forward(self, signum: int) -> None:
        pid = self.jobs.fg_pid()
        if pid:
            try:
                os.kill(-pid, signum)
            except ProcessLookupError:
                pass

    def sigint_handler(self, signum, frame) -> None:
        """Send SIGINT to the foreground job's process group."""
        self._forward(signal.SIGINT)

    def sigtstp_handler(self, signum, frame) -> None:
        """Send SIGTSTP to the foreground job's process group."""
        self._forward(signal.SIGTSTP)

    def sigquit_handler(self, signum, frame) -> None:
        """End the shell on SIGQUIT."""
        self._write("Terminating after receipt of SIGQUIT signal\n")
        self._flush()
        raise SystemExit(1)

    def install_handlers(self) -> None:
        """Install the shell's signal handlers."""
        signal.signal(signal.SIGINT, self.sigint_handler)
        signal.signal(signal.SIGTSTP, self.sigtstp_handler)
        signal.signal(signal.SIGCHLD, self.sigchld_handler)
        signal.signal(signal.SIGQUIT, self.sigquit_handler)

    def run(self, stream: TextIO, emit_prompt: bool = True) -> int:
        """Read and evaluate command lines from ``stream`` until end of file."""
        while True:
            if emit_prompt:
                self._write(PROMPT)
                self._flush()
            try:
                line = stream.readline(MAXLINE - 1)
            except OSError:
                self._write("fgets error\n")
                self._flush()
                raise SystemExit(1)
            if not line or (not line.endswith("\n") and len(line) < MAXLINE - 1):
                self._flush()
                return 0
            self.eval(line)
            self._flush()


def main(argv: list[str] | None = None) -> int:
    """Run the shell on standard input; options -h, -v and -p."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, _rest = getopt.getopt(args, "hvp")
    except getopt.GetoptError:
        usage(sys.stdout)
        return 1
    verbose = False
    emit_prompt = True
    for opt, _value in opts:
        if opt == "-h":
            usage(sys.stdout)
            return 1
        if opt == "-v":
            verbose = True
        elif opt == "-p":
            emit_prompt = False

    sys.stdout.flush()
    os.dup2(1, 2)
    shell = Shell(verbose, sys.stdout)
    shell.install_handlers()
    return shell.run(sys.stdin, emit_prompt)


if __name__ == "__main__":
    sys.exit(main())