"""
Sample data for an empty deployment.

``load_seed_data`` inserts a fixed, cross-referencing catalog: packages
point at the seeded repositories by id and carry their names. Once every
insert has succeeded the derived ``package_count`` of each seeded repository
is recomputed from the packages table.

The loader is meant to run once against an empty store (see the schema
guard). Running it twice fails on the unique names.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional

from robohub_inventory.adapters.database import DatabaseAdapter
from robohub_inventory.models.custom_types import utcnow
from robohub_inventory.repositories.inventory import (
    DatasetRepository,
    PackageRepository,
    RepoRepository,
    ScenarioRepository,
    SimulatorRepository,
)
from robohub_inventory.schemas.common import Owner
from robohub_inventory.schemas.dataset import DataSplit, Dataset, DatasetSchema, PreviewAssets, Topic
from robohub_inventory.schemas.package import Dependency, Package, ValidationStatus
from robohub_inventory.schemas.repository import LatestCommit, Repository
from robohub_inventory.schemas.scenario import RequiredInput, Scenario, SuccessCriterion
from robohub_inventory.schemas.simulator import Simulator

logger = logging.getLogger(__name__)

ROS_PLANNING = Owner(id="user-001", name="ros-planning", avatar_url="https://avatars.githubusercontent.com/ros-planning")
ROS_PERCEPTION = Owner(id="user-002", name="ros-perception", avatar_url="https://avatars.githubusercontent.com/ros-perception")


@dataclass
class SeedSummary:
    """Counts of the rows inserted by one seed run."""
    repositories: int = 0
    packages: int = 0
    scenarios: int = 0
    datasets: int = 0
    simulators: int = 0

    def __str__(self):
        return (
            f"{self.repositories} repos, {self.packages} packages, {self.scenarios} scenarios, "
            f"{self.datasets} datasets, {self.simulators} simulators"
        )


def build_repositories(now: datetime) -> List[Repository]:
    return [
        Repository(
            name="ros-planning/navigation2",
            provider="github",
            url="https://github.com/ros-planning/navigation2",
            description="ROS 2 Navigation Stack",
            default_branch="main",
            visibility="public",
            sync_status="synced",
            auto_sync=True,
            latest_commit=LatestCommit(
                hash="a1b2c3d4e5f6",
                message="Add new planner plugin",
                author="John Doe",
                date=now - timedelta(hours=24),
                url="https://github.com/ros-planning/navigation2/commit/a1b2c3d4e5f6",
            ),
            webhook_status="active",
            tags=["ros2", "navigation", "autonomous"],
            owner=ROS_PLANNING,
        ),
        Repository(
            name="ros-perception/perception_pcl",
            provider="github",
            url="https://github.com/ros-perception/perception_pcl",
            description="PCL (Point Cloud Library) ROS interface",
            default_branch="ros2",
            visibility="public",
            sync_status="synced",
            auto_sync=True,
            latest_commit=LatestCommit(
                hash="b2c3d4e5f6a1",
                message="Update point cloud filters",
                author="Jane Smith",
                date=now - timedelta(hours=48),
                url="https://github.com/ros-perception/perception_pcl/commit/b2c3d4e5f6a1",
            ),
            webhook_status="active",
            tags=["ros2", "perception", "point-cloud"],
            owner=ROS_PERCEPTION,
        ),
    ]


def build_packages(repos: List[Repository], now: datetime) -> List[Package]:
    """Two packages on the first repository, one on the second."""
    navigation, perception = repos
    return [
        Package(
            name="nav2_planner",
            display_name="Nav2 Planner",
            description="Global path planning server for Nav2",
            repo_id=navigation.id,
            repo_name=navigation.name,
            path="nav2_planner",
            types=["planner", "navigation"],
            latest_version="1.1.9",
            versions=["1.1.9", "1.1.8", "1.1.7"],
            tags=["navigation", "planning", "ros2"],
            keywords=["path-planning", "global-planner", "navigation"],
            validation_status=ValidationStatus(last_validated=now - timedelta(hours=1), status="pass", pass_rate=95.5),
            owner=ROS_PLANNING,
            license="Apache-2.0",
            dependencies=[Dependency(name="nav2_core", version="1.1.9"), Dependency(name="nav2_costmap_2d", version="1.1.9")],
        ),
        Package(
            name="nav2_controller",
            display_name="Nav2 Controller",
            description="Local trajectory planning and control for Nav2",
            repo_id=navigation.id,
            repo_name=navigation.name,
            path="nav2_controller",
            types=["control", "navigation"],
            latest_version="1.1.9",
            versions=["1.1.9", "1.1.8", "1.1.7"],
            tags=["navigation", "control", "ros2"],
            keywords=["trajectory", "controller", "dwa"],
            validation_status=ValidationStatus(last_validated=now - timedelta(hours=2), status="pass", pass_rate=92.3),
            owner=ROS_PLANNING,
        ),
        Package(
            name="pcl_ros",
            display_name="PCL ROS",
            description="Point Cloud Library ROS2 integration",
            repo_id=perception.id,
            repo_name=perception.name,
            path="pcl_ros",
            types=["perception", "sensors"],
            latest_version="2.5.0",
            versions=["2.5.0", "2.4.0", "2.3.0"],
            tags=["perception", "point-cloud", "ros2"],
            keywords=["pcl", "3d-vision", "lidar"],
            validation_status=ValidationStatus(last_validated=now - timedelta(hours=3), status="pass", pass_rate=88.7),
            owner=ROS_PERCEPTION,
        ),
    ]


def build_scenarios() -> List[Scenario]:
    return [
        Scenario(
            name="Warehouse Navigation Basic",
            slug="warehouse-nav-basic",
            description="Navigate through a basic warehouse environment with static obstacles",
            category="navigation",
            difficulty="easy",
            maintained_by="RoboHub",
            verified=True,
            what_it_tests=["Obstacle avoidance", "Path planning", "Goal reaching"],
            why_it_matters="Validates basic navigation capabilities in structured environments",
            real_world_analogs=["Amazon fulfillment center", "Retail warehouse"],
            domain="indoor",
            supported_simulators=["Gazebo", "CARLA", "Unity"],
            required_inputs=[
                RequiredInput(name="start_pose", type="geometry_msgs/PoseStamped", description="Starting position"),
                RequiredInput(name="goal_pose", type="geometry_msgs/PoseStamped", description="Target position"),
            ],
            success_criteria=[
                SuccessCriterion(name="Success Rate", description="Percentage of successful goal reaches", threshold=">90%", unit="percentage"),
                SuccessCriterion(name="Path Efficiency", description="Path length vs optimal", threshold="<120%", unit="percentage"),
            ],
            pass_definition="Robot reaches goal without collisions within time limit",
            tags=["navigation", "warehouse", "basic"],
            owner=Owner(id="robohub-001", name="RoboHub Team"),
            version="1.0.0",
        ),
        Scenario(
            name="Urban Autonomous Driving",
            slug="urban-autonomous-driving",
            description="Navigate through urban environment with dynamic obstacles and traffic rules",
            category="navigation",
            difficulty="hard",
            maintained_by="Community",
            verified=True,
            what_it_tests=["Dynamic obstacle avoidance", "Traffic rule compliance", "Lane keeping"],
            why_it_matters="Tests autonomous vehicle capabilities in complex real-world scenarios",
            real_world_analogs=["City streets", "Downtown traffic"],
            domain="urban",
            supported_simulators=["CARLA", "AirSim"],
            required_inputs=[
                RequiredInput(name="route", type="nav_msgs/Path", description="Planned route"),
                RequiredInput(name="traffic_rules", type="json", description="Local traffic regulations"),
            ],
            success_criteria=[
                SuccessCriterion(name="Safety Score", description="No collisions or violations", threshold="100%", unit="percentage"),
                SuccessCriterion(name="Arrival Time", description="Within expected time window", threshold="±10%", unit="percentage"),
            ],
            pass_definition="Complete route safely while following all traffic rules",
            tags=["autonomous-driving", "urban", "advanced"],
            owner=Owner(id="community-001", name="AV Community"),
            version="2.1.0",
        ),
        Scenario(
            name="Object Detection Indoor",
            slug="object-detection-indoor",
            description="Detect and classify objects in indoor environment using camera and lidar",
            category="perception",
            difficulty="medium",
            maintained_by="Partner",
            verified=True,
            what_it_tests=["Object detection accuracy", "Classification performance", "Multi-sensor fusion"],
            why_it_matters="Validates perception pipeline for indoor manipulation tasks",
            real_world_analogs=["Home assistance", "Office automation"],
            domain="indoor",
            supported_simulators=["Gazebo", "Webots"],
            required_inputs=[
                RequiredInput(name="sensor_data", type="sensor_msgs/PointCloud2", description="3D sensor data"),
                RequiredInput(name="camera_image", type="sensor_msgs/Image", description="RGB camera feed"),
            ],
            success_criteria=[
                SuccessCriterion(name="Detection Rate", description="Percentage of objects detected", threshold=">85%", unit="percentage"),
                SuccessCriterion(name="False Positives", description="Incorrect detections", threshold="<5%", unit="percentage"),
            ],
            pass_definition="Detect at least 85% of objects with less than 5% false positives",
            tags=["perception", "object-detection", "indoor"],
            owner=Owner(id="partner-001", name="TechPartner Inc"),
            version="1.5.0",
        ),
    ]


def build_datasets() -> List[Dataset]:
    return [
        Dataset(
            name="Warehouse Navigation Dataset v1",
            slug="warehouse-nav-v1",
            description="Indoor warehouse navigation data with lidar and camera feeds",
            type="robotics",
            modality="multimodal",
            format="rosbag2",
            license="MIT",
            tags=["warehouse", "navigation", "indoor"],
            whats_inside=["Lidar scans", "RGB camera images", "Odometry", "Ground truth poses"],
            size_gb=15.5,
            samples_count=10000,
            duration=3600,
            source="uploaded",
            owner_type="organization",
            owner_id="org-001",
            owner_name="RoboHub Labs",
            visibility="public",
            preview_assets=PreviewAssets(
                thumbnail_url="https://cdn.robohub.dev/datasets/warehouse-nav-v1/thumb.png",
                sample_frames=[
                    "https://cdn.robohub.dev/datasets/warehouse-nav-v1/frame-0001.png",
                    "https://cdn.robohub.dev/datasets/warehouse-nav-v1/frame-0500.png",
                ],
            ),
            data_schema=DatasetSchema(
                topics=[
                    Topic(name="/scan", message_type="sensor_msgs/LaserScan", frequency="10Hz", description="2D lidar scans"),
                    Topic(name="/camera/image_raw", message_type="sensor_msgs/Image", frequency="30Hz", description="Front RGB camera"),
                    Topic(name="/odom", message_type="nav_msgs/Odometry", frequency="50Hz", description="Wheel odometry"),
                ],
                data_splits=[
                    DataSplit(name="train", percentage=80, description="Training sequences"),
                    DataSplit(name="val", percentage=20, description="Validation sequences"),
                ],
            ),
        ),
        Dataset(
            name="Urban Driving CARLA",
            slug="urban-driving-carla",
            description="Synthetic urban driving data generated in CARLA simulator",
            type="autonomous-driving",
            modality="multimodal",
            format="parquet",
            license="CC-BY",
            tags=["autonomous-driving", "urban", "synthetic"],
            whats_inside=["RGB cameras", "Depth images", "Semantic segmentation", "Vehicle telemetry"],
            size_gb=50.2,
            samples_count=25000,
            duration=7200,
            source="partner",
            owner_type="organization",
            owner_id="org-002",
            owner_name="CARLA Team",
            visibility="public",
            data_schema=DatasetSchema(
                topics=[
                    Topic(name="/carla/ego/rgb_front", message_type="sensor_msgs/Image", frequency="20Hz", description="Front camera"),
                    Topic(name="/carla/ego/depth_front", message_type="sensor_msgs/Image", frequency="20Hz", description="Front depth"),
                ],
            ),
        ),
        Dataset(
            name="Indoor Object Recognition",
            slug="indoor-object-recognition",
            description="Labeled indoor objects dataset for perception tasks",
            type="indoor-mapping",
            modality="camera",
            format="hdf5",
            license="Apache-2.0",
            tags=["perception", "object-detection", "indoor"],
            whats_inside=["Labeled RGB images", "Bounding boxes", "Object classes", "Depth maps"],
            size_gb=8.3,
            samples_count=5000,
            duration=1800,
            source="uploaded",
            owner_type="user",
            owner_id="user-003",
            owner_name="DataScience Team",
            visibility="public",
        ),
    ]


def build_simulators() -> List[Simulator]:
    return [
        Simulator(
            name="Gazebo Classic",
            description="Gazebo Classic simulation environment for robotics",
            type="gazebo",
            version="11.12.0",
            config={"physics_engine": "ODE", "render_mode": "headless", "real_time_factor": 1.0},
            tags=["gazebo", "ros", "simulation"],
        ),
        Simulator(
            name="CARLA Simulator",
            description="Open-source simulator for autonomous driving research",
            type="carla",
            version="0.9.15",
            config={"render_quality": "Epic", "weather": "ClearNoon", "fixed_delta_seconds": 0.05},
            tags=["carla", "autonomous-driving", "urban"],
        ),
        Simulator(
            name="Unity Robotics Hub",
            description="Unity-based robotics simulation platform",
            type="unity",
            version="2023.1.0",
            config={"graphics_api": "Vulkan", "physics_timestep": 0.02, "ros_bridge": True},
            tags=["unity", "robotics", "simulation"],
        ),
    ]


async def load_seed_data(database: DatabaseAdapter, now: Optional[datetime] = None) -> SeedSummary:
    """
    Insert the sample catalog and recompute repository package counts.

    Args:
        database: Connected store handle
        now: Reference time for the relative timestamps in the sample data

    Returns:
        SeedSummary: Number of rows inserted per aggregate

    Raises:
        DuplicateNameError: If the store already holds seeded rows
        StorageError: If an insert fails
    """
    now = now or utcnow()
    repo_repository = RepoRepository(database)
    package_repository = PackageRepository(database)
    scenario_repository = ScenarioRepository(database)
    dataset_repository = DatasetRepository(database)
    simulator_repository = SimulatorRepository(database)
    summary = SeedSummary()

    repos = []
    for repo in build_repositories(now):
        repos.append(await repo_repository.create(repo))
    summary.repositories = len(repos)

    for package in build_packages(repos, now):
        await package_repository.create(package)
        summary.packages += 1

    for scenario in build_scenarios():
        await scenario_repository.create(scenario)
        summary.scenarios += 1

    for dataset in build_datasets():
        await dataset_repository.create(dataset)
        summary.datasets += 1

    for simulator in build_simulators():
        await simulator_repository.create(simulator)
        summary.simulators += 1

    await recompute_package_counts(repo_repository, package_repository, [repo.id for repo in repos])

    logger.info(f"Seed data loaded successfully: {summary}")
    return summary


async def recompute_package_counts(
    repo_repository: RepoRepository,
    package_repository: PackageRepository,
    repo_ids: List[str],
) -> None:
    """Store, for each repository, the number of packages pointing at it."""
    for repo_id in repo_ids:
        count = await package_repository.count_by_repo(repo_id)
        await repo_repository.set_package_count(repo_id, count)
