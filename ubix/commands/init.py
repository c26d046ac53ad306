"""Implementation of ``ubix init``: create a new solution.

A solution is a folder named after the sanitized solution name with the
layout below and a ``ubix.json`` manifest at its root:

    <name>/
        data/
        scripts/
            R/
            py/
        dsl/
        ubix.json
"""

from pathlib import Path

from ubix.commands.options import InitOptions
from ubix.config.settings import Settings
from ubix.solution.manifest import Manifest, ManifestStore, SolutionFields
from ubix.solution.naming import sanitize_file_name
from ubix.solution.validation import (
    API_PATTERN,
    NAME_PATTERN,
    VERSION_PATTERN,
    default_error_message,
    matches,
    questionary_validator,
    validated_param,
)
from ubix.ui.prompts import Prompter, PromptField
from ubix.utils.console import print_info, print_success, print_warning
from ubix.utils.errors import (
    InvalidFormatError,
    ParameterErrors,
    SolutionExistsError,
    SolutionIOError,
    UserCancelledError,
)
from ubix.utils.logging import log_message

SOLUTION_FOLDERS: tuple[str, ...] = ("data", "scripts", "scripts/R", "scripts/py", "dsl")

INIT_FIELDS: tuple[PromptField, ...] = (
    PromptField(
        "name",
        "Solution name",
        questionary_validator(
            NAME_PATTERN, "Use letters, digits, '_', '-' and spaces only", required=True
        ),
    ),
    PromptField("author", "Author"),
    PromptField(
        "version",
        "Solution version",
        questionary_validator(VERSION_PATTERN, "Use MAJOR.MINOR.PATCH, e.g. 1.0.0", required=True),
    ),
    PromptField(
        "api",
        "UBIX API version",
        questionary_validator(API_PATTERN, "Use 'latest' or MAJOR.MINOR.PATCH", required=True),
    ),
)


def solution_directory(root: str | Path, name: str) -> Path:
    """Return the folder a solution called ``name`` lives in under ``root``.

    Raises:
        InvalidFormatError: If nothing of ``name`` survives sanitization
    """
    sanitized = sanitize_file_name(name)
    if not sanitized:
        raise InvalidFormatError(default_error_message("name", name))
    return Path(root) / sanitized


def ensure_absent(target: Path) -> None:
    """Make sure nothing exists at ``target`` yet.

    Raises:
        SolutionExistsError: If a file, folder or link is already there
        SolutionIOError: If ``target`` cannot be inspected
    """
    try:
        target.lstat()
    except FileNotFoundError:
        return
    except OSError as e:
        raise SolutionIOError(f"Cannot create solution at {target}: {e}", path=target) from e
    raise SolutionExistsError(
        f"Cannot create solution at {target}: folder already exists.", path=target
    )


def create_skeleton(target: Path) -> None:
    """Create the solution folder and its subfolders.

    Raises:
        SolutionIOError: If a folder cannot be created
    """
    try:
        for folder in SOLUTION_FOLDERS:
            (target / folder).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SolutionIOError(f"Failed to create solution: {e}", path=target) from e
    log_message(f"Created solution folders under {target}")


def collect_fields(options: InitOptions, settings: Settings, prompter: Prompter) -> SolutionFields:
    """Gather the manifest fields from options, defaults and the user.

    Values given on the command line are checked first, as a batch. Valid
    ones are used without asking; invalid ones are reported and then
    asked for like values that were never given. The final answers must
    all be valid.

    Raises:
        ParameterErrors: If the final values are still invalid
    """
    params = {
        "name": options.solution_name,
        "author": options.author,
        "version": options.version,
        "api": options.api,
    }
    arg_errors: list[str] = []
    supplied = {
        "name": validated_param(params, "name", pattern=NAME_PATTERN, errors=arg_errors),
        "author": validated_param(params, "author"),
        "version": validated_param(params, "version", pattern=VERSION_PATTERN, errors=arg_errors),
        "api": validated_param(params, "api", pattern=API_PATTERN, errors=arg_errors),
    }
    if arg_errors:
        print_warning("Errors in parameters:\n  * " + "\n  * ".join(arg_errors))

    defaults = {
        "name": options.solution_name,
        "author": settings.default_author,
        "version": settings.default_version,
        "api": settings.default_api,
    }

    answers: dict[str, str] = {}
    for prompt_field in INIT_FIELDS:
        value = supplied[prompt_field.name]
        if value is None:
            value = prompter.ask(prompt_field, defaults[prompt_field.name])
        answers[prompt_field.name] = str(value).strip()

    errors = [
        default_error_message(key, answers[key])
        for key, pattern in (("name", NAME_PATTERN), ("version", VERSION_PATTERN), ("api", API_PATTERN))
        if not matches(pattern, answers[key])
    ]
    if errors:
        raise ParameterErrors(errors, heading="Error processing parameters")

    return SolutionFields(
        name=answers["name"],
        author=answers["author"],
        version=answers["version"],
        api=answers["api"],
    )


def run_init(
    options: InitOptions,
    settings: Settings,
    prompter: Prompter,
    store: ManifestStore | None = None,
) -> tuple[Path, Manifest]:
    """Create a solution folder with its manifest.

    Args:
        options: Options of the command
        settings: Effective configuration (prompt defaults)
        prompter: How missing values are asked for
        store: Manifest store to write with

    Returns:
        The solution folder and the manifest written into it

    Raises:
        SolutionExistsError: If the solution folder already exists
        SolutionIOError: If the folder cannot be inspected or created
        ParameterErrors: If the collected values are invalid
        UserCancelledError: If the user declines to create the solution
    """
    store = store or ManifestStore()
    root = Path(options.path or ".")
    log_message(f"init: name={options.solution_name!r} root={root}")

    target = solution_directory(root, options.solution_name)
    ensure_absent(target)

    fields = collect_fields(options, settings, prompter)

    # A name changed at the prompt moves the solution folder along with it
    final_target = solution_directory(root, fields.name)
    if final_target != target:
        ensure_absent(final_target)

    if not prompter.confirm(f"Create solution at {final_target}?", default=True):
        raise UserCancelledError("Solution creation cancelled")

    print_info(f"Creating solution at {final_target}")
    create_skeleton(final_target)
    manifest = store.create(final_target, fields)
    print_success(f"Solution '{fields.name}' created at {final_target}")
    return final_target, manifest


__all__ = [
    "INIT_FIELDS",
    "SOLUTION_FOLDERS",
    "collect_fields",
    "create_skeleton",
    "ensure_absent",
    "run_init",
    "solution_directory",
]
