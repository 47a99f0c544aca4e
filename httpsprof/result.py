import json
from datetime import datetime
from typing import Optional

from httpsprof.summary import SummaryReport, summarize
from httpsprof.target import Target


class ProfileResult:
    def __init__(self, url: str, target: Target, port: int,
                 timeout: Optional[float]=None):
        self.inputs = {
            'url': url,
            'host': target.host,
            'path': target.path,
            'port': port,
            'timeout': timeout,
            'num_cycles': 0,
            'start_time': datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        }
        self.records = []

    def append(self, record):
        self.inputs['num_cycles'] += 1
        self.records.append(record)

    def summarize(self) -> SummaryReport:
        return summarize(self.records)

    def to_dict(self):
        return {
            'inputs': self.inputs,
            'outputs': [record.to_dict() for record in self.records],
            'summary': self.summarize().to_dict(),
        }

    def print(self, pretty_print=False):
        if pretty_print:
            print(json.dumps(self.to_dict(), indent=2))
        else:
            print(json.dumps(self.to_dict()))

    def plot(self, output_filename: str):
        """Saves the latency of each cycle, marking failed cycles, to a file
        whose format is given by its extension (e.g., .pdf or .png).
        """
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt

        cycles = list(range(len(self.records)))
        times = [record.elapsed_ms for record in self.records]
        failed = [i for i, record in enumerate(self.records)
                  if not record.succeeded]

        fig, ax = plt.subplots(figsize=(8, 5))
        ax.plot(cycles, times, '-o', label='latency')
        if failed:
            ax.scatter(failed, [times[i] for i in failed], color='red',
                       zorder=3, label='failed')
        ax.set_xlabel('Request')
        ax.set_ylabel('Time (ms)')
        ax.set_title(f'https://{self.inputs["host"]}{self.inputs["path"]}')
        ax.grid(True, linestyle='--', alpha=0.6)
        ax.legend()
        fig.tight_layout()
        fig.savefig(output_filename, bbox_inches='tight')
        plt.close(fig)
