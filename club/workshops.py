from dataclasses import dataclass


@dataclass(frozen=True)
class Workshop:
    week: int
    label: str
    slug: str  # note name under /notes/

    @property
    def title(self):
        return f"Week {self.week}: {self.label}"


WORKSHOPS = (
    Workshop(1, "Time Complexity", "complexity"),
    Workshop(2, "Brute Force + Set/Map (optional)", "brute"),
    Workshop(3, "Greedy Problems", "greedy"),
    Workshop(4, "Graph (DFS, BFS, Shortest Path)", "graph"),
    Workshop(5, "DP 1 (Basic 1D + Table DP)", "dp_1"),
    Workshop(6, "Binary Search", "binarysearch"),
    Workshop(7, "Prefix Sums", "prefix_sum"),
    Workshop(8, "2 pointers, sliding window", "sliding_window"),
    Workshop(9, "DP on Tree", "dp_tree"),
    Workshop(10, "DSU, MST", "dsu_mst"),
    Workshop(11, "Math", "math"),
)
