import lifedispatch as ld
import lifedispatch.codegen as lc

try:
    import click
except ImportError:
    raise ImportError("lifedispatch.cli requires the 'click' package to be installed. Please install it using 'pip install click' or 'pip install lifedispatch[cli]'.")

@click.command()
@click.argument('template', required=False, default="game_of_life.wgsl")
@click.option('--rule', default=None, help="Ruleset name or B/S rulestring (e.g. B36/S23) to splice into the template.")
@click.option('--asset_root', '--asset-root', default=None, type=click.Path(file_okay=False), help="Directory templates are read from.")
@click.option('--debug', is_flag=True, help="Write the resolved shader next to the template and print info logs.")
@click.option('--line_numbers', '--line-numbers', is_flag=True, help="Prefix every line of the output with its line number.")
@click.option('--log_info', is_flag=True, help="Will print info messages.")
@click.option('--verbose', is_flag=True, help="Will print verbose messages.")
@click.option('--list_rules', '--list-rules', is_flag=True, help="Print the known rulesets and exit.")
@click.version_option(version=ld.__version__)
def cli_entrypoint(template, rule, asset_root, debug, line_numbers, log_info, verbose, list_rules):
    if verbose:
        ld.set_log_level(ld.LogLevel.VERBOSE)
    elif log_info or debug:
        ld.set_log_level(ld.LogLevel.INFO)
    else:
        ld.set_log_level(ld.LogLevel.WARNING)

    if list_rules:
        for name in lc.list_rulesets():
            click.echo(name)
        return

    config = ld.AssemblerConfig.from_environment(asset_root)

    if debug:
        config.debug_shader = True

    try:
        statement = lc.ruleset_from_string(rule) if rule is not None else None
    except ValueError as err:
        raise click.BadParameter(str(err), param_hint="'--rule'")

    try:
        shader = ld.ShaderAssembler(config).assemble(template, statement)
    except ld.ShaderAssemblyError as err:
        raise click.ClickException(str(err))

    if line_numbers:
        click.echo(repr(shader), nl=False)
    else:
        click.echo(shader.source)
