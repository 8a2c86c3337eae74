"""Error formatting for CLI output."""


def format_versioning_error(error: BaseException) -> str:
    """Format an error and the chain of errors that caused it.

    Example output:
        Version validation error
          caused by: Invalid version format for org.example::core::1.0: '1.0'. Expected format: <version>-SNAPSHOT
    """
    lines = [str(error) or type(error).__name__]
    cause = error.__cause__ or error.__context__
    seen = {id(error)}
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        lines.append(f"  caused by: {str(cause) or type(cause).__name__}")
        cause = cause.__cause__ or cause.__context__
    return "\n".join(lines)
