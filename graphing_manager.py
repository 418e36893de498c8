# graphing_manager.py

import os
import matplotlib.pyplot as plt
import logger as log
import constants as C

class GraphingManager:
    """
    Collects benchmark results across dataset sizes and plots how the
    quadtree compares to the naive scan as the dataset grows.
    """
    def __init__(self):
        self.data = {
            'total_points': [],
            'build_seconds': [],
            'quadtree_search_seconds': [],
            'naive_search_seconds': [],
            'speedup': [],
        }
        self.saved_files = []
        self.figures = []
        log.log("GraphingManager initialized.")

    def add_result(self, result):
        """
        Adds one benchmark result to all data series.
        """
        self.data['total_points'].append(result.total_points)
        self.data['build_seconds'].append(result.build_seconds)
        self.data['quadtree_search_seconds'].append(result.quadtree_search_seconds)
        self.data['naive_search_seconds'].append(result.naive_search_seconds)
        self.data['speedup'].append(result.speedup)

    def add_results(self, results):
        for result in results:
            self.add_result(result)

    def has_data(self):
        return len(self.data['total_points']) > 0

    def _save(self, fig, output_dir, file_name, label):
        try:
            file_path = os.path.join(output_dir, file_name)
            fig.savefig(file_path)
            self.saved_files.append(file_path)
            log.log(f"[GraphingManager] {label} graph saved to {file_path}")
        except Exception as e:
            log.log(f"[GraphingManager] ERROR: Could not save {label.lower()} graph. Reason: {e}")
        self.figures.append(fig)

    def generate_and_save_search_time_graph(self, output_dir):
        """
        Plots quadtree and naive search times against dataset size on log axes.
        """
        log.log(f"[GraphingManager] Generating search time plot with {len(self.data['total_points'])} data points...")

        fig, ax = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)
        ax.plot(self.data['total_points'], self.data['quadtree_search_seconds'], marker='o', label='Quadtree Search')
        ax.plot(self.data['total_points'], self.data['naive_search_seconds'], marker='s', label='Naive Search')
        ax.set_xscale('log')
        ax.set_yscale('log')

        ax.set_title('Range Search Time vs Dataset Size')
        ax.set_xlabel('Points Indexed')
        ax.set_ylabel('Search Time (seconds)')
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()

        fig.tight_layout()
        self._save(fig, output_dir, C.GRAPH_SEARCH_TIME_FILE, "Search time")

    def generate_and_save_speedup_graph(self, output_dir):
        log.log("[GraphingManager] Generating speedup plot...")

        fig, ax = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)
        ax.plot(self.data['total_points'], self.data['speedup'], marker='o', color='tab:green', label='Naive / Quadtree')
        ax.axhline(1.0, color='r', linestyle='--', linewidth=0.8, label='Break-even')
        ax.set_xscale('log')

        ax.set_title('Quadtree Speedup Over Naive Search')
        ax.set_xlabel('Points Indexed')
        ax.set_ylabel('Speedup (x)')
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()

        fig.tight_layout()
        self._save(fig, output_dir, C.GRAPH_SPEEDUP_FILE, "Speedup")

    def generate_and_save_build_time_graph(self, output_dir):
        log.log("[GraphingManager] Generating build time plot...")

        fig, ax = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)
        ax.plot(self.data['total_points'], self.data['build_seconds'], marker='o', color='tab:purple', label='Generate + Insert')
        ax.set_xscale('log')
        ax.set_yscale('log')

        ax.set_title('Population Time vs Dataset Size')
        ax.set_xlabel('Points Indexed')
        ax.set_ylabel('Time (seconds)')
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()

        fig.tight_layout()
        self._save(fig, output_dir, C.GRAPH_BUILD_TIME_FILE, "Build time")

    def generate_and_save_graphs(self, output_dir=None, show=False):
        """
        Generates and saves all graphs if data exists, optionally displaying them.
        """
        if not self.has_data():
            log.log("[GraphingManager] No data collected, skipping plot generation.")
            return []

        output_dir = output_dir or C.GRAPH_OUTPUT_DIR
        self.generate_and_save_search_time_graph(output_dir)
        self.generate_and_save_speedup_graph(output_dir)
        self.generate_and_save_build_time_graph(output_dir)

        if show:
            plt.show()
        for fig in self.figures:
            plt.close(fig)
        self.figures.clear()
        return list(self.saved_files)
