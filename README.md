# tfguard

tfguard holds the building blocks of a security scanner for Terraform configurations:

- `tfguard.provider`: the cloud providers a check applies to (`Provider`), with
  `display_name()` and `const_name()`, and `rule_provider_to_string` for the upper-case form.
- `tfguard.severity`: the severity levels (`Severity`) with `is_valid()`, `valid()` and
  `as_ordinal()`, and `string_to_severity`, which parses names case-insensitively and maps
  `ERROR`, `WARNING` and `INFO` onto `HIGH`, `MEDIUM` and `LOW`.
- `tfguard.rule`: `RuleMetadata`, `Block`, `Result` and `Rule`. A rule targets blocks by type,
  by label and, for `module` blocks, by source. Labels and sources support `*` wildcards
  through `wildcard_match`.
- `tfguard.scanner`: a `Scanner` that collects paths, finds the root module directories to
  scan and filters results, configured through `ScannerOptions`.

## Installation

```
pip install .
```

## Matching rules to blocks

```python
from tfguard.rule import Block, Result, Rule, RuleMetadata, wildcard_match

rule = Rule(
    metadata=RuleMetadata(provider="aws", service="s3", short_code="no-public"),
    required_types=["resource"],
    required_labels=["aws_s3_*"],
    check_terraform=lambda block, module: [Result("bucket is public", block)],
)
print(rule.id())  # aws-s3-no-public

bucket = Block("resource", ["aws_s3_bucket", "logs"], {"acl": "public-read"}, "main.tf")
assert rule.is_required_for_block(bucket)
results = rule.check_against_block(bucket, None)
assert results[0].rule is rule.metadata

assert wildcard_match("aws_*", "aws_instance")
assert not wildcard_match("gcp_*", "aws_instance")
```

A block matches when its type is one of `required_types` and its first label matches one of
`required_labels` (an empty list matches everything). For `module` blocks the first value of
the `source` attribute must also match one of `required_sources`; a source starting with `.`
is first resolved against the block's file and made relative to the working directory
(`clean_path_relative_to_working_dir`). `check_against_block` returns an empty list when the
rule has no check or does not apply, and otherwise tags each result with the rule's metadata.

## Finding root modules

```python
from tfguard.scanner import Scanner, ScannerOptions

scanner = Scanner(ScannerOptions(force_all_dirs=False))
scanner.add_path("./infrastructure")
for directory in scanner.root_modules():
    print(directory)
```

`add_path` adds a directory, or the directory holding a file, and raises
`FileNotFoundError` for a path that does not exist. A root module is a directory that
directly holds `.tf` or `.tf.json` files (`is_root_module`). When an added directory is not
one, its subdirectories are searched; with `force_all_dirs` they are searched even after a
root was found. Directories nested inside another one in the list are dropped
(`remove_nested_dirs`). If `debug_writer` is set, a `[debug:scan]` line is written to it.

## Filtering results

`Scanner.filter_results` applies, in order, the filters that the options switch on:

- `skip_downloaded`: drops results without a file and results inside a `.terraform`
  directory (`skip_downloaded_filter`).
- `exclude_paths`: drops results without a file and results under any of the paths
  (`exclude_paths_filter`).
- `include_only_results`: keeps only results whose rule has one of the given long IDs
  (`include_only_results_filter`).

## Severities

```python
from tfguard.severity import Severity, string_to_severity

assert string_to_severity("warning") is Severity.MEDIUM
assert Severity.CRITICAL.as_ordinal() > Severity.LOW.as_ordinal()
```

## What this package does not do

tfguard does not parse HCL or JSON configuration files, evaluate variables or modules, or run
rules across a whole directory; blocks are built by the caller. It ships no built-in rules and
no command-line tool. `ScannerOptions` carries fields such as `config_file`,
`custom_check_dir`, `workspace_name` and `tfvars_paths`, but nothing in the package reads them.

## Running the tests

```
pip install .[test]
pytest
```