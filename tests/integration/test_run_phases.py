import logging
import os

from compsim import RunConfig, run_benchmark
from compsim import _fsops
from tests.helpers.asserts import assert_no_residue, assert_sample_counts


def test_run_collects_every_sample(sim_config, tmp_path):
    result = run_benchmark(sim_config)
    assert_sample_counts(result)
    assert len(result.samples.file_creation) == 6
    assert result.failed_writes == []
    assert_no_residue(tmp_path)


def test_file_paths_in_creation_order(sim_config):
    result = run_benchmark(sim_config)
    rel = [os.path.relpath(p, result.root) for p in result.file_paths]
    assert rel == [
        os.path.join(f"subfolder_{i}", f"file_{j}.dat") for i in range(2) for j in range(3)
    ]


def test_root_created_under_root_path(sim_config, tmp_path):
    result = run_benchmark(sim_config)
    assert os.path.dirname(result.root) == str(tmp_path)
    assert os.path.basename(result.root).startswith("compiler_sim_")


def test_two_runs_use_distinct_roots(sim_config):
    first = run_benchmark(sim_config)
    second = run_benchmark(sim_config)
    assert first.root != second.root


def test_zero_subfolders(tmp_path):
    cfg = RunConfig(root_path=str(tmp_path), num_subfolders=0, files_per_subfolder=0)
    result = run_benchmark(cfg)
    assert len(result.samples.folder_creation) == 1
    assert result.samples.file_creation == []
    assert result.samples.file_reading == []
    assert result.samples.file_deletion == []
    assert len(result.samples.folder_deletion) == 1
    assert_no_residue(tmp_path)


def test_subfolders_without_files(tmp_path):
    cfg = RunConfig(root_path=str(tmp_path), num_subfolders=4, files_per_subfolder=0)
    result = run_benchmark(cfg)
    assert_sample_counts(result)
    assert_no_residue(tmp_path)


def test_empty_files(tmp_path):
    cfg = RunConfig(root_path=str(tmp_path), file_size=0, num_subfolders=1, files_per_subfolder=5)
    result = run_benchmark(cfg)
    assert_sample_counts(result)
    assert_no_residue(tmp_path)


def test_no_cleanup_keeps_empty_folders(tmp_path):
    cfg = RunConfig(
        root_path=str(tmp_path), file_size=10, num_subfolders=3, files_per_subfolder=2,
        cleanup=False,
    )
    result = run_benchmark(cfg)
    assert_sample_counts(result)
    assert sorted(os.listdir(result.root)) == ["subfolder_0", "subfolder_1", "subfolder_2"]
    for sub in result.subfolders:
        assert os.listdir(sub) == []


def test_folders_deleted_empty_and_in_reverse_order(sim_config, monkeypatch):
    removed = []
    original = _fsops.remove_dir

    def checked_remove_dir(path):
        assert os.listdir(path) == []
        removed.append(path)
        original(path)

    monkeypatch.setattr(_fsops, "remove_dir", checked_remove_dir)
    result = run_benchmark(sim_config)
    assert removed == [result.subfolders[1], result.subfolders[0], result.root]


def test_progress_logged_every_hundred_files(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="compsim")
    cfg = RunConfig(root_path=str(tmp_path), file_size=0, num_subfolders=1, files_per_subfolder=250)
    run_benchmark(cfg)
    messages = [r.getMessage() for r in caplog.records]
    assert "File creation progress: 100 files created" in messages
    assert "File creation progress: 200 files created" in messages
    assert "File reading progress: 200 files read" in messages
    assert "File deletion progress: 100 files deleted" in messages
    assert not any(m.startswith("File") and "250" in m for m in messages)


def test_progress_logged_every_ten_folders(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="compsim")
    cfg = RunConfig(root_path=str(tmp_path), num_subfolders=25, files_per_subfolder=0)
    run_benchmark(cfg)
    messages = [r.getMessage() for r in caplog.records]
    assert "Folder deletion progress: 10 folders deleted" in messages
    assert "Folder deletion progress: 20 folders deleted" in messages
    assert messages[0].startswith("Created root folder: ")
