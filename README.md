# oscope

A small software oscilloscope built on matplotlib. A background thread samples
a sine wave with adjustable amplitude and frequency. A plot shows the wave in a
time window that moves forward by its own length each time the elapsed time
passes the window's end.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
oscope
```

This opens the oscilloscope window and starts sampling. Sampling stops when
the window is closed. The window contains:

- sliders for **Displayed [s]** (1–100, starts at 10), **Sample Interval [ms]**
  (0–20, starts at 10), **Zero Level** of the vertical axis (−400–0, starts at
  −200), **Amplitude** (0–200, starts at 160) and **Frequency [Hz]** (0.1–20,
  starts at 17.8);
- a **Show Item Legend** check box, which shows the current amplitude and
  frequency inside the plot;
- a **Stop** button, which pauses the display. Its label then changes to
  **Play**, which resumes the display;
- a **Capture** button, which stores an 800×600 PNG snapshot of the plot and
  lists it by timestamp, amplitude and frequency;
- an **Open capture #** box. Type the index of a listed snapshot to view it;
- a **Color** box, which takes any matplotlib colour name or code for the curve.

## Using it as a library

Each module can be used on its own:

- `oscope.signal_data.SignalData` is a thread-safe store of `(x, y)` points
  with a bounding `Rect`. It offers `append`, `clear_stale_values`, `len()`,
  indexing, `bounding_rect()`, and `locked()` for reading. `SignalData.instance()`
  returns a shared store.
- `oscope.sampling.SamplingThread` is a thread that appends sine samples to a
  `SignalData` every `interval` milliseconds, until `stop()` is called.
- `oscope.controls.Knob` and `oscope.controls.WheelBox` are bounded values
  that notify listeners registered with `connect`.
- `oscope.plot.Plot` holds the axis state and the curve settings. Its `tick`
  method advances the window, `render` draws onto a matplotlib `Axes`, and
  `capture` / `capture_image` store and return PNG snapshots.
- `oscope.image_viewer.ImageViewer` shows a captured PNG and saves it with
  `save(path)`.
- `oscope.app.MainWindow` joins the pieces together. `oscope.app.main` runs
  the program.

```python
from oscope.signal_data import SignalData
from oscope.sampling import SamplingThread
from oscope.plot import Plot
from oscope.image_viewer import ImageViewer

data = SignalData()
sampler = SamplingThread(frequency=5.0, amplitude=20.0, interval=10.0, data=data)

sampler.sample(0.05)          # append one point taken at t = 0.05 s
print(len(data), data[0])
print(data.bounding_rect())

plot = Plot(data, interval_length=10.0)
plot.capture(800, 600)        # store a PNG snapshot
viewer = ImageViewer(plot.capture_image(0), "snapshot.png")
viewer.save()                 # writes snapshot.png
```

## What it does not do

- The window has no file dialog. Snapshots are kept only in memory unless
  they are saved with `ImageViewer.save`. The viewer opened from the window
  only displays the image.
- There is no colour picker. The curve colour is entered as text.
- The signal is always a generated sine wave. No external input source can
  be read.