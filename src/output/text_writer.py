"""Plain text dump of all grid fields, for debugging."""

from .base_writer import OutputWriter


class OutputWriterText(OutputWriter):
    """Writes ``output_XXXX.txt`` per step with u, v, p, F, G and rhs.

    Each field is printed as a table with the top row (largest j) first and
    the logical indices as row and column labels, ghost cells included.
    """

    def write_file(self, current_time):
        grid = self.discretization.grid
        path = self._next_path(".txt")

        lines = [
            f"t: {current_time}",
            f"nCells: {grid.n_cells[0]} x {grid.n_cells[1]}, dx: {grid.dx}, dy: {grid.dy}",
            "",
        ]
        for name, field in grid.fields().items():
            lines.extend(self._format_field(name, field))
            lines.append("")

        path.write_text("\n".join(lines))
        return path

    @staticmethod
    def _format_field(name, field):
        n_i, n_j = field.size
        i_labels = range(field.i_begin, field.i_end)

        lines = [f"{name} ({n_i}x{n_j}): "]
        lines.append("     |" + "".join(f"{i:>11d}" for i in i_labels))
        lines.append("-" * (6 + 11 * n_i))

        for b in range(n_j - 1, -1, -1):
            j = field.j_begin + b
            values = "".join(f"{field.data[a, b]:>11.4g}" for a in range(n_i))
            lines.append(f"{j:>4d} |{values}")

        return lines
