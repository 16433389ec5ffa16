import matplotlib.pyplot as plt
import numpy as np

from .logger import TreeMergeLog

class PerformanceDisplay:
    def __init__(self, logs,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 dot_size=20, dot_alpha=0.6,
                 dot_color='blue',
                 trend_line_color='red', trend_line_linewidth=2,
                 moving_avg_window=10):
        self.logs = logs
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.dot_size = dot_size
        self.dot_alpha = dot_alpha
        self.dot_color = dot_color
        self.trend_line_color = trend_line_color
        self.trend_line_linewidth = trend_line_linewidth
        self.moving_avg_window = moving_avg_window

    def _moving_average(self, data):
        window = self.moving_avg_window
        if window < 1:
            raise ValueError("moving_avg_window must be at least 1")
        window = min(window, len(data))
        return np.convolve(data, np.ones(window) / window, mode='same')

    def _finish(self, title, xlabel, ylabel, show_graph, save_path):
        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel(xlabel, fontsize=self.font_size)
        plt.ylabel(ylabel, fontsize=self.font_size)
        plt.grid(True)
        plt.legend(fontsize=self.font_size)
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        else:
            plt.close()

    def _plot_graph(self, y_values, title, xlabel, ylabel, show_graph = False, save_path=None):
        if not y_values:
            print(f"No data available for {title}.")
            return False

        x = np.arange(1, len(y_values) + 1)
        y = np.array(y_values)
        trend = self._moving_average(y)

        plt.figure(figsize=self.fig_size, dpi=self.dpi)

        plt.scatter(x, y, s=self.dot_size, alpha=self.dot_alpha, color=self.dot_color, label="Data points")
        plt.plot(x, trend, color=self.trend_line_color, linewidth=self.trend_line_linewidth, label="Moving Average Trend")

        self._finish(title, xlabel, ylabel, show_graph, save_path)
        return True

    def generate_merge_weight_plot(self, show_graphs = False, save_path=None):
        values = [log.merged_weight for log in self.logs if isinstance(log, TreeMergeLog)]
        return self._plot_graph(values, "Tree Merge Weights", "Merge Order", "Merged Weight", show_graphs, save_path)

    def generate_code_length_plot(self, compressed_model, show_graphs = False, save_path=None):
        """
        Scatter the code length of every symbol against its frequency.

        The dashed line is the ideal length -log2(p) of each frequency.
        """
        frequencies = compressed_model.frequencies
        code_table = compressed_model.code_table
        if len(frequencies) == 0:
            print("No data available for Code Length by Frequency.")
            return False

        symbols = list(frequencies)
        counts = np.array([frequencies[s] for s in symbols], dtype=np.float64)
        lengths = np.array([len(code_table[s]) for s in symbols], dtype=np.float64)
        ideal_x = np.sort(counts)
        ideal = -np.log2(ideal_x / counts.sum())

        plt.figure(figsize=self.fig_size, dpi=self.dpi)

        plt.scatter(counts, lengths, s=self.dot_size, alpha=self.dot_alpha, color=self.dot_color, label="Symbols")
        plt.plot(ideal_x, ideal, linestyle='--', color=self.trend_line_color, linewidth=self.trend_line_linewidth, label="Ideal length")

        self._finish("Code Length by Frequency", "Frequency", "Code Length (bits)", show_graphs, save_path)
        return True
