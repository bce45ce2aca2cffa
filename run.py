#!/usr/bin/env python3
"""
Simple script to run a belief propagation simulation from a config file.
"""

import argparse
import logging
import os
import sys
from datetime import datetime

from dotenv import load_dotenv

from belief_network.config.config_manager import ConfigManager
from belief_network.data.analysis import SimulationAnalyzer
from belief_network.data.export import save_export
from belief_network.simulation.controller import Controller
from belief_network.visualization import plot_belief_history, plot_network

# Load environment variables from .env file
load_dotenv()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run a belief propagation simulation from a config file")
    parser.add_argument("--config", default=None, help="Configuration file path (default: $BELIEF_NETWORK_CONFIG or config.json)")
    parser.add_argument("--output-dir", default=None, help="Output directory")
    parser.add_argument("--export-csv", action="store_true", help="Export final agent data as CSV")
    parser.add_argument("--plots", action="store_true", help="Save belief history and network plots")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args(argv)

    # Setup logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
    logger = logging.getLogger(__name__)

    # Load config
    try:
        config_manager = ConfigManager(args.config)
    except FileNotFoundError as e:
        logger.error(f"❌ {e}")
        return 1
    except ValueError as e:
        logger.error(f"❌ Invalid JSON in config file: {e}")
        return 1

    if not config_manager.validate_config():
        return 1

    sim_config = config_manager.get_simulation_config()
    output_dir = args.output_dir or config_manager.get_output_directory()
    run_dir = os.path.join(output_dir, f"{sim_config.network_type}_{datetime.now().strftime('%m-%d-%H-%M-%S')}")

    logger.info("🧪 Starting Belief Propagation Simulation")
    logger.info("=" * 50)
    logger.info(f"Config: {config_manager.config_path}")
    logger.info(f"Topology: {sim_config.network_type} (density {sim_config.network_density})")
    logger.info(f"Agents: {sim_config.agent_count}, initial believers: {sim_config.initial_believer_percentage}%")
    logger.info(f"Steps: {sim_config.steps}")

    try:
        controller = Controller(sim_config, output_file=os.path.join(run_dir, "results.json"))
        controller.run_simulation(progress_bar=not args.no_progress)

        analysis = SimulationAnalyzer(controller.storage).analyze_belief_evolution()
        logger.info(f"Believers: {analysis['initial_believer_percentage']:.1f}% -> "
                    f"{analysis['final_believer_percentage']:.1f}% "
                    f"({analysis['total_belief_flips']} belief flips)")

        if args.export_csv:
            path = save_export(controller.network, os.path.join(run_dir, "agents.csv"))
            logger.info(f"📁 Exported agent data: {path}")

        if args.plots:
            viz = config_manager.get_visualization_params()
            plot_belief_history(controller.history, os.path.join(run_dir, "plots", "belief_history.png"),
                                topic=controller.network.current_topic, **viz)
            plot_network(controller.network, os.path.join(run_dir, "plots", "network.png"),
                         layout_seed=sim_config.random_seed, dpi=viz["dpi"])
            logger.info("📊 Plots saved")

    except Exception as e:
        logger.error(f"❌ Simulation failed: {e}")
        raise

    logger.info(f"✅ Results saved to: {run_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
