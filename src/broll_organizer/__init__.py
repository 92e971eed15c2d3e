"""
B-Roll Organizer – turns a narration script into scenes paired with stock footage.

Use from code:
  from broll_organizer.config import AppConfig
  from broll_organizer.adapters import default_adapters
  from broll_organizer.application.pipeline import FootagePipeline
  pipeline = FootagePipeline(**default_adapters(AppConfig.from_env()))
  scenes = asyncio.run(pipeline.run_script(text))

Providers and segmenters are ports; inject fakes or new adapters as needed.
"""

__version__ = "0.1.0"
