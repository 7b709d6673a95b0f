import click

from dfree.display.columns import ColumnType, parse_columns


class MutuallyExclusiveOption(click.Option):
    def __init__(self, *args, **kwargs):
        self.mutually_exclusive = set(kwargs.pop("mutually_exclusive", []))
        help = kwargs.get("help", "")
        if self.mutually_exclusive:
            ex_str = ", ".join(sorted(self.mutually_exclusive))
            kwargs["help"] = help + (
                " NOTE: This option is mutually exclusive with "
                " options: [%s]." % ex_str
            )
        super().__init__(*args, **kwargs)

    def handle_parse_result(self, ctx, opts, args):
        if self.mutually_exclusive.intersection(opts) and self.name in opts:
            raise click.UsageError(
                "Illegal usage: `%s` is mutually exclusive with "
                " `%s`." % (self.name, ", ".join(sorted(self.mutually_exclusive)))
            )

        return super().handle_parse_result(ctx, opts, args)


def columns_callback(ctx, param, value):
    """Turns a comma separated --columns value into ColumnType members."""
    if value is None:
        return None
    try:
        columns = parse_columns(value.split(","))
    except ValueError as e:
        choices = ", ".join(c.value for c in ColumnType)
        raise click.BadParameter(f"{e}. Choose from: {choices}") from e
    if not columns:
        raise click.BadParameter("at least one column is required")
    return columns
