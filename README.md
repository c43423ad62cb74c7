# jitt

Jira + Git + Tiny Tooling.

`jitt` keeps a small `.jitt.yaml` file in your Git repository. The file records
which Jira project the repository belongs to.

## Installation

```
pip install .
```

This installs the `jitt` command.

## Usage

```
jitt init                  # Create .jitt.yaml with an empty project
jitt init ABC              # Create .jitt.yaml with project=ABC
jitt config                # Show all configuration
jitt config project        # Show the current project
jitt config project XYZ    # Set the project to XYZ
jitt doctor                # Check that the setup is correct
jitt help                  # Show the help message (also --help, -h)
```

`.jitt.yaml` is always read from and written to the current directory.

`init` and `config` only run inside a Git repository. A directory counts as one
when it, or one of its parents, holds a `.git` entry. Outside a repository
these commands print an error and exit with status 1.

`jitt init` will not overwrite an existing `.jitt.yaml`. The file it writes
looks like this:

```yaml
jira:
  project: ABC
```

An empty project is written as `project: ""`.

`jitt config` exits with status 1 in these cases:

- `.jitt.yaml` is missing
- the file cannot be read
- the key given is anything other than `project`

`jitt doctor` runs anywhere. It prints a check mark for each part of the setup
that is in place. It exits with status 1 when either of these is true:

- the directory is not in a Git repository
- `.jitt.yaml` is missing or cannot be loaded

In both cases it also suggests running `jitt init`. If no project is set, it
prints a warning and still exits with status 0.

Running `jitt` with no command exits with status 1, and so does an unknown
command. Both print the usage message.

## Library use

```python
from jitt import config

if not config.exists():
    config.create("ABC")

cfg = config.load()
print(cfg.jira.project)

config.update("jira.project", "XYZ")
```

`config.load()` returns a `Config` whose `jira` field is a `JiraConfig` with a
`project` string. Missing keys load as an empty project. It raises these
errors:

- `config.ConfigNotFoundError` when there is no `.jitt.yaml`
- `config.ConfigError` when the file cannot be read or parsed
- `config.ConfigError` when its `jira` entry is not a mapping

`config.update(key, value)` takes a dotted key. It sets the value in the
existing file and writes the file back. It raises `config.ConfigError` when the
file does not exist or cannot be read.

The command handlers live in `jitt.commands`:

- `handle_init`
- `handle_config`
- `handle_doctor`

Each one takes the list of arguments that follow the command name, prints its
output and returns the exit code. `jitt.cli.main(argv)` dispatches to them.

## What it does not do

`jitt` only manages the local `.jitt.yaml` setting. It does not connect to a
Jira server, look up issues, or run any Git commands.

## Development

```
pip install -e ".[test]"
pytest
```