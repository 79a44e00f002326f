"""CLI entry point for pwsh-skills."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click

from pwshskills.config.settings import Settings
from pwshskills.exceptions import PwshSkillsError

if TYPE_CHECKING:
    from pwshskills.engine.resolver import CourseResolver

BANNER_RULE = "=" * 44


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    from pwshskills.version import version_message

    click.echo(version_message())
    ctx.exit()


def _header(title: str) -> None:
    click.echo(title)
    click.echo(BANNER_RULE)


def _report_error(err: PwshSkillsError) -> None:
    click.echo(f"❌ {err.message}")
    if err.remedy:
        click.echo(f"💡 {err.remedy}")


def _settings(ctx: click.Context) -> Settings:
    return ctx.find_root().obj["settings"]


def _resolver(settings: Settings) -> CourseResolver:
    from pwshskills.courses.registry import CourseRegistry
    from pwshskills.engine.progress import progress_source_for
    from pwshskills.engine.resolver import CourseResolver

    registry = CourseRegistry(progress_source_for(settings.progress_source))
    return CourseResolver(registry=registry)


@click.group(invoke_without_command=True)
@click.option("--verbose", is_flag=True, help="Log debug output to stderr")
@click.option(
    "--version", is_flag=True, expose_value=False, is_eager=True,
    callback=_print_version, help="Show version information and exit",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Interactive PowerShell GitHub Skills course assistant."""
    ctx.ensure_object(dict)
    if "settings" not in ctx.obj:
        ctx.obj["settings"] = Settings.load()
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, stream=sys.stderr,
            format="%(name)s: %(levelname)s: %(message)s",
        )
    if ctx.invoked_subcommand is None:
        click.echo("🚀 Welcome to PowerShell GitHub Skills!")
        click.echo()
        click.echo("📚 Available Commands:")
        click.echo("  status     📊 Show your progress across all courses")
        click.echo("  hint       💡 Get contextual hints for your current step")
        click.echo("  validate   🧪 Test your PowerShell code locally")
        click.echo("  next       ⏭️  Move to the next course")
        click.echo("  back       ⏮️  Go back to the previous course")
        click.echo("  courses    📖 List every course in the series")
        click.echo()
        click.echo("💡 Start with 'pwsh-skills status' to see your current progress!")


@main.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show current progress across all PowerShell courses."""
    from pwshskills.engine.context import NavigationContext
    from pwshskills.engine.progress import ProgressAggregator, progress_bar
    from pwshskills.engine.repository import get_repo_info, require_git_repo

    settings = _settings(ctx)
    _header("📍 PowerShell GitHub Skills - Progress Status")
    nav = NavigationContext.from_cwd()
    try:
        require_git_repo(nav)
        repo = get_repo_info(settings.host_cli, settings.timeout_seconds)
        resolver = _resolver(settings)
    except PwshSkillsError as e:
        _report_error(e)
        return

    click.echo(f"📂 Repository: {repo}")

    courses = resolver.detected_courses(nav)
    if not courses:
        click.echo("❌ No PowerShell Skills courses detected in this repository.")
        return

    aggregator = ProgressAggregator(resolver, settings.minutes_per_step)
    click.echo("\n🎯 Course Progress:")
    for course in courses:
        mark = "✅" if course.completed else "🔄"
        click.echo(f"  {mark} {course.name}")
        click.echo(
            f"     Progress: [{progress_bar(course)}] "
            f"{course.current_step}/{course.total_steps} steps"
        )
        if not course.completed:
            minutes = aggregator.estimated_minutes_remaining(course)
            click.echo(f"     ⏱️  Estimated time remaining: {minutes} minutes")
        click.echo()

    summary = aggregator.summarize(nav)
    click.echo(
        f"🏆 Overall Progress: {summary.completed}/{summary.total} "
        f"courses completed ({summary.percentage:.1f}%)"
    )


@main.command()
@click.pass_context
def hint(ctx: click.Context) -> None:
    """Get contextual hints for the current step."""
    from pwshskills.engine.context import NavigationContext
    from pwshskills.engine.hints import PRO_TIPS, category_for, pick_hint
    from pwshskills.exceptions import CourseNotDetected

    _header("💡 PowerShell GitHub Skills - Contextual Hint")
    nav = NavigationContext.from_cwd()
    try:
        current = _resolver(_settings(ctx)).current_course(nav)
        if current is None:
            raise CourseNotDetected(
                remedy="Please run from a PowerShell Skills course directory."
            )
    except PwshSkillsError as e:
        _report_error(e)
        return

    category = category_for(current)
    if category is None:
        click.echo(f"❌ No hints available for course: {current.name}")
        return

    chosen = pick_hint(category)
    click.echo(f"🎯 Topic: {chosen.title}\n")
    click.echo(f"📝 Explanation:\n{chosen.description}\n")
    click.echo(f"💻 Example:\n{chosen.example}\n")
    click.echo(f"📚 Learn More: {chosen.reference}\n")
    click.echo("🔧 Pro Tips:")
    for tip in PRO_TIPS[category]:
        click.echo(f"• {tip}")
    click.echo("\n🚀 Ready to continue? Use 'pwsh-skills validate' to test your solution!")


def _navigate(ctx: click.Context, forward: bool) -> None:
    from pwshskills.engine.context import NavigationContext
    from pwshskills.engine.navigator import Navigator
    from pwshskills.engine.repository import require_git_repo
    from pwshskills.exceptions import CourseNotDetected

    nav = NavigationContext.from_cwd()
    try:
        require_git_repo(nav)
        resolver = _resolver(_settings(ctx))
        current = resolver.current_course(nav)
        if current is None:
            raise CourseNotDetected()
    except PwshSkillsError as e:
        _report_error(e)
        return

    if forward:
        target = resolver.next_course(nav, current)
        if target is None:
            click.echo("🎉 Congratulations! You've completed all available PowerShell courses!")
            click.echo("🏆 You're at the final course. Great job on your PowerShell journey!")
            return
        click.echo(f"📍 Current: {current.name}")
        click.echo(f"⏭️  Next: {target.name}\n")
    else:
        target = resolver.previous_course(nav, current)
        if target is None:
            click.echo("🎯 You're already at the first course!")
            click.echo(
                "💡 This is where your PowerShell journey begins. "
                "Move forward with 'pwsh-skills next' when ready!"
            )
            return
        click.echo(f"📍 Current: {current.name}")
        click.echo(f"⏮️  Previous: {target.name}\n")

    try:
        moved = Navigator().move_to(nav, target)
    except PwshSkillsError as e:
        _report_error(e)
        return

    verb = "navigated to" if forward else "navigated back to"
    click.echo(f"✅ Successfully {verb}: {target.name}")
    click.echo(f"📂 Directory: {moved.cwd}\n")
    if forward:
        click.echo("🚀 Ready to start!")
        click.echo("Next steps:")
        click.echo("1. Read the course README.md")
        click.echo("2. Follow the step-by-step instructions")
        click.echo("3. Use 'pwsh-skills hint' for contextual help")
        click.echo("4. Use 'pwsh-skills validate' to test your solutions")
    else:
        click.echo("🔄 Back to previous course!")
        click.echo("You can:")
        click.echo("1. Review the course content")
        click.echo("2. Re-read the README.md")
        click.echo("3. Use 'pwsh-skills status' to check progress")
        click.echo("4. Use 'pwsh-skills next' to move forward again")


@main.command(name="next")
@click.pass_context
def next_(ctx: click.Context) -> None:
    """Navigate to the next PowerShell course."""
    _header("⏭️  PowerShell GitHub Skills - Next Course")
    _navigate(ctx, forward=True)


@main.command()
@click.pass_context
def back(ctx: click.Context) -> None:
    """Navigate back to the previous PowerShell course."""
    _header("⏮️  PowerShell GitHub Skills - Previous Course")
    _navigate(ctx, forward=False)


@main.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Validate your PowerShell solution locally."""
    from pathlib import Path

    from pwshskills.engine.validator import Validator

    _header("🧪 PowerShell Solution Validation")
    validator = Validator(settings=_settings(ctx))
    root = Path.cwd()
    try:
        interpreter = validator.interpreter
    except PwshSkillsError as e:
        _report_error(e)
        return
    click.echo(f"✅ PowerShell detected ({interpreter})")

    files = validator.discover(root)
    if not files:
        click.echo("❌ No PowerShell files found in current directory")
        click.echo("   Make sure you have created .ps1 files for your solution")
        return

    click.echo(f"🔍 Found {len(files)} PowerShell file(s) to validate:")
    for path in files:
        click.echo(f"   • {path}")
    click.echo()

    report = validator.validate_tree(root, files)
    for result in report.files:
        name = result.path.relative_to(root)
        click.echo(f"🔍 Validating: {name}")
        if result.syntax_error is not None:
            click.echo(f"  ❌ Syntax Error: {result.syntax_error}")
            continue
        click.echo("  ✅ Syntax: Valid")
        if result.read_error is not None:
            click.echo(f"  ❌ {result.read_error}")
            continue
        if result.warnings:
            click.echo("  ⚠️  Cross-platform compatibility warnings:")
            for warning in result.warnings:
                click.echo(f"     • {warning}")
        else:
            click.echo("  ✅ Cross-platform: Compatible")
        if result.suggestions:
            click.echo("  💡 Best practice suggestions:")
            for suggestion in result.suggestions:
                click.echo(f"     • {suggestion}")
        click.echo(f"✅ {name} - All checks passed")

    click.echo()
    if report.passed:
        click.echo("🎉 All validations passed!")
        click.echo("🚀 Your solution is ready to commit and push!")
        click.echo()
        click.echo("Next steps:")
        click.echo("1. git add .")
        click.echo('2. git commit -m "Complete step X"')
        click.echo("3. git push")
        click.echo()
        click.echo("💡 Use 'pwsh-skills status' to check your progress")
    else:
        click.echo("❌ Some validations failed. Please fix the issues and try again.")


@main.command()
@click.pass_context
def courses(ctx: click.Context) -> None:
    """List every course in the series."""
    from pwshskills.engine.context import NavigationContext

    nav = NavigationContext.from_cwd()
    try:
        resolver = _resolver(_settings(ctx))
    except PwshSkillsError as e:
        _report_error(e)
        return
    for course in resolver.registry.list_courses():
        present = resolver.probe.has_course_marker(nav, course.directory)
        mark = "✅" if present else "  "
        click.echo(f"  {mark} {course.index + 1}: {course.name} ({course.directory})")
